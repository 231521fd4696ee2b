# /* ~~~ spacing mode: "foo( int x )" instead of "foo(int x)" ~~~ */
EXTRA_SPACE: bool = False

# Placeholder delimiters: top-level slots vs. slots inside an Optional chunk
PLACEHOLDER_DELIMITERS: tuple[str, str] = ("⟪", "⟫")
OPTIONAL_PLACEHOLDER_DELIMITERS: tuple[str, str] = ("⟦", "⟧")
PLACEHOLDER_MARKERS: tuple[str, ...] = ("⟪", "⟫", "⟦", "⟧")

# Compiler-reserved names ("__pos") are shown without the double underscore
RESERVED_UNDERSCORES: str = "__"

# Qualifiers ignored when comparing call shapes
KEY_QUALIFIERS: tuple[str, ...] = ("const", "volatile")

# Candidate dump files picked up by the loader
CANDIDATE_EXTS = [".json", ".jsonl"]

# folders to skip
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", "node_modules", "__pycache__"}
