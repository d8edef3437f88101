from dupfinder.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "md5": HashAlgorithmName.MD5,
    "xxhash": HashAlgorithmName.XXHASH,
    "xxh64": HashAlgorithmName.XXHASH,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content digest used to detect duplicates:\n"
    "  md5        : MD5 of the full file content (default)\n"
    "  xxhash     : xxHash64 of the full file content (faster)\n"
    "Neither is safe against deliberately crafted collisions.\n"
    "Example    : %(prog)s -i ~/Downloads --algorithm xxhash"
)

EPILOG_TEXT = """
Examples:
  Basic usage - find duplicates in Downloads folder
  %(prog)s -i ~/Downloads

  Only look at images
  %(prog)s -i ~/Pictures -x .jpg .png .gif

  Show size and modification time of every file, hash with 4 threads
  %(prog)s -i ~/Downloads --details --workers 4

Nothing is ever deleted: [DEL] marks files that could be removed.
"""
