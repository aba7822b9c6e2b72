from keildb.convertor import CompileCommand, Converter
from keildb.errors import (BuildFailure, IOFailure, KeildbError, MalformedDescriptor,
                           MalformedTrace, SerializationFailure, TargetNotFound)

__version__ = "0.1.0"
