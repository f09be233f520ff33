"""
Generators — produce editor-client configuration fragments.

Each platform module exposes pure functions taking a list of file-type
identifiers (and sometimes a server identifier) and returning either a
fragment list (one per file type, input order) or a single joined string.
"""
