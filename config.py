DEFAULT_YEAR = 2009
DEFAULT_VERBOSITY = 0                # 0 = silent, 1 = ignored storms, 2 = every wind sample
MAX_VERBOSITY = 2

# AL = Atlantic, EP = Northeast Pacific, CP = Central Pacific
DEFAULT_BASINS = ("AL", "EP", "CP")

DEFAULT_ENCODING = "utf-8"
