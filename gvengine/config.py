# fmt: off

#########################
#       Rendering       #
#########################

DEFAULT_FORMAT = "png"
DEFAULT_LAYOUT = "dot"
DEFAULT_FILENAME = "graph"
DEFAULT_DIRECTORY = "."

FORMAT_FLAG = "-T"
OUTPUT_FLAG = "-o"

#########################
#    Temporary Files    #
#########################

TEMP_PREFIX = "graph"
INPUT_SUFFIX = "gv"
ENCODING = "utf-8"

#########################
#      Environment      #
#########################

PATH_ENV = "PATH"

# fmt: on
