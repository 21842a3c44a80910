VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"


ARGV0 = "optlist"
DESCRIPTION = "A getopt style command line option parser that returns every option as a list"

# Index of an option with no value in argv
NO_INDEX = -1

PATH_DELIMITERS = ("\\", "/", ":")
DEMO_OPTIONS = "a:bcd:ef?"

EXTRA_ARGS_ENV = "OPTLIST_EXTRA_ARGS"
VERBOSE_ENV = "OPTLIST_VERBOSE"
