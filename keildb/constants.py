import os

### CONFIGURABLE VARIABLES ###
UV4_PATH       = os.environ.get("KEILDB_UV4", "C:/Keil_v5/UV4/UV4.exe")
OUTPUT_FILE    = os.environ.get("KEILDB_OUTPUT", "compile_commands.json")
BUILD_TIMEOUT  = int(os.environ.get("KEILDB_BUILD_TIMEOUT", "600"))
TRACE_ENCODING = os.environ.get("KEILDB_ENCODING", "utf-8")

### FIXED VARIABLES ###
COMPILER_PREFIXES = ("armcc", "armclang")
STD_HEADER_MARKERS = {"stdio.h", "iostream"}
INCLUDE_FLAG = "-I"
