class KeildbError(Exception):
    pass


class TargetNotFound(KeildbError):
    pass


class MalformedDescriptor(KeildbError):
    pass


class MalformedTrace(KeildbError):
    pass


class IOFailure(KeildbError):
    pass


class SerializationFailure(KeildbError):
    pass


class BuildFailure(KeildbError):
    pass
