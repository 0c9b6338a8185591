# Compiled-in defaults. Paths are relative to the user's home directory.
SOURCE_DIR_NAMES = ["Desktop", "Downloads", "Documents", "Pictures", "Movies", "Music"]

MEDIA_ROOT = "Media"
ARCHIVE_ROOT = "Archive"
DOCS_ROOT = "Docs"
THREED_ROOT = "3D"

# Shell-style patterns matched against the base name only.
IGNORE_PATTERNS = [
    "dont_move_me.txt",
    ".tmp",
    ".crdownload",
    "*.part",
    ".DS_Store",
    "Thumbs.db",
    "iTunes",
    "Music Library.musiclibrary",
    "*.musiclibrary",
    "System",
    "Library",
    ".Trash",
    "Applications",
    ".localized",
]
# Ignored without a log line.
SILENT_IGNORES = {".localized", ".DS_Store"}

SCREENSHOT_PATTERNS = [
    "Screen Shot *.png",
    "Screenshot *.png",
    "CleanShot *.png",
    "Monosnap *.png",
]

SCREENSHOTS_FOLDER = "Screenshots"
CAMERA_FOLDER = "Camera"
CAMERA_DIR_MARKER = "CANON"
CAMERA_EXTENSION = "raw"

# (root, subfolder, extensions)
CATEGORY_RULES = [
    (MEDIA_ROOT, "Audio", ["mp3", "wav", "flac", "aac", "ogg", "m4a", "wma", "aiff", "au"]),
    (MEDIA_ROOT, "Photos", ["jpg", "jpeg", "png", "gif", "bmp", "tiff", "tif", "webp", "heic", "heif", "svg"]),
    (MEDIA_ROOT, "Video", ["mp4", "avi", "mkv", "mov", "wmv", "flv", "webm", "m4v", "3gp", "mpg", "mpeg", "ogv"]),
    (MEDIA_ROOT, "Shop", ["psd", "pxd", "ai", "sketch", "fig", "xd", "indd", "lrcat", "lrtemplate"]),
    (ARCHIVE_ROOT, "Compressed", ["zip", "rar", "7z", "tar", "gz", "bz2", "xz", "z"]),
    (ARCHIVE_ROOT, "DiskImages", ["dmg", "iso", "img", "bin", "cue", "pkg"]),
    (THREED_ROOT, "CAD", ["stl", "ply", "step", "stp", "iges", "igs", "sat", "brep"]),
    (THREED_ROOT, "Drawings", ["dxf", "dwg"]),
    (THREED_ROOT, "Objects", ["obj", "3ds", "fbx", "dae", "blend", "max", "ma", "mb"]),
    (THREED_ROOT, "Prints", ["gcode", "x3g", "3mf"]),
    (DOCS_ROOT, "Text", ["txt", "md", "rtf", "tex"]),
    (DOCS_ROOT, "Docs", ["doc", "docx", "pages", "odt"]),
    (DOCS_ROOT, "Slides", ["ppt", "pptx", "key", "odp"]),
    (DOCS_ROOT, "Pdf", ["pdf"]),
    (DOCS_ROOT, "Sheets", ["xls", "xlsx", "numbers", "ods", "csv"]),
]
