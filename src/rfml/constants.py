"""Constants for the RFML format and rfml CLI."""

# Line markers
IDENTITY_MARKER = "#!"
COMMENT_MARKER = "#"
DIRECTIVE_SEPARATOR = ":"
EMBEDDED_TEST_MARKER = "- "
LIST_SEPARATOR = ","

# Upload-triggering template calls, e.g. {{ file.download(./path) }}
UPLOAD_NAMESPACE = "file"
UPLOAD_FUNCTIONS = ("download", "screenshot")

CONFIG_FILENAME = "rfml.toml"
RFML_SUFFIX = ".rfml"
