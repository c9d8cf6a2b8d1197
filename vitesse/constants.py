HOT_FILE_NAME = "hot"
BUILD_DIRECTORY = "build"
MANIFEST_FILE_NAME = "manifest.json"
VITE_CLIENT_PATH = "@vite/client"
FILES_SEPARATOR = "|"
