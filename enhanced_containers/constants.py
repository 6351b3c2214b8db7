"""
Collection of constants that are used around the project.
Try not to modify these constants in most cases as to preserve compatibility
with previously serialized data.
"""
ID_KEY = "id"
"""Key holding the identity of an item in its serialized form"""
NAME_KEY = "n"
"""Key holding the name of a named item in its serialized form"""
CREATION_TIME_KEY = "t"
"""Key holding the creation time stamp of a timed item in its serialized form"""
CONFIG_FILE = "enhanced_containers.config.json"
"""Name of the configuration file"""
CONFIG_LOCK_FILE = "enhanced_containers.config.lock"
"""Name of the lock file guarding the configuration file"""
LOGGER_NAME = "enhanced_containers"
"""Name of the logger used by the whole package"""
