"""
Shared TMDb images library code.

This package is reused by:
- the FastAPI app in `api/`
- CLI scripts in `scripts/`

Entrypoints live outside this package and import from `tmdb_images`, never the other way around.
"""
