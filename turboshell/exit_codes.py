"""Exit status constants used by turboshell."""

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Reported by a child whose exec failed; never surfaced as the shell's own status
EXIT_CODE_EXEC_FAILED = EXIT_FAILURE
