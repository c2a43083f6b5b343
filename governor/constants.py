# Maximum length of group names, slugs, user names and email addresses in the database.
MAX_NAME_LENGTH = 256

# Characters that survive slugification of a group name.  Runs of anything else collapse into a
# single hyphen.
SLUG_INVALID_CHARACTERS = r"[^a-z0-9]+"
