from hashrename.core.models import CollisionPolicy
from hashrename.core.hasher import DEFAULT_ALGORITHM, available_algorithms

COLLISION_ALIASES = {
    "error": CollisionPolicy.ERROR,
    "overwrite": CollisionPolicy.OVERWRITE,
    "replace": CollisionPolicy.OVERWRITE,
    "trash": CollisionPolicy.TRASH,
}

COLLISION_CHOICES = list(COLLISION_ALIASES.keys())

COLLISION_HELP_TEXT = (
    "What to do when the target name already exists:\n"
    "  error      : Report the file as failed, never overwrite (default)\n"
    "  overwrite  : Replace the existing file (alias: replace)\n"
    "  trash      : Keep the existing file, move the duplicate source to trash\n"
)

HASH_CHOICES = available_algorithms()

HASH_HELP_TEXT = (
    "Hash used to build the new filenames:\n"
    "  sha1        : 40 hex characters\n"
    "  sha256      : 64 hex characters (default when sha512_256 is unavailable)\n"
    "  sha512_256  : 64 hex characters (default when OpenSSL provides it)\n"
    "  blake2b     : 128 hex characters\n"
    "  xxh64       : 16 hex characters (fast, not cryptographic)\n"
    "  xxh128      : 32 hex characters (fast, not cryptographic)\n"
    f"Default: {DEFAULT_ALGORITHM}"
)

EPILOG_TEXT = """
Examples:
  Preview renames of all JPEGs in the current folder
  %(prog)s --dry-run '*.jpg'

  Rename photos and scans, 8 files at a time
  %(prog)s -j 8 'photos/*.jpg' 'scans/**/*.png'

  Use a short, fast hash and move byte-identical duplicates to trash
  %(prog)s --hash xxh128 --on-collision trash 'downloads/*'

  Re-hash files even if their names already look like a hash
  %(prog)s --no-skip-hashed-filenames 'store/*'

Quote the patterns so they are expanded by %(prog)s, not by the shell.
"""
