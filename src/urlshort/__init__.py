"""urlshort: serve HTTP redirects from a path -> url mapping.

Build a handler from YAML (or JSON, or a plain dict) and a fallback for
paths that are not mapped.  The handler is an ASGI application::

    from urlshort import yaml_handler, not_found

    yml = '''
    - path: /urlshort
      url: https://github.com/gophercises/urlshort
    '''
    app = yaml_handler(yml, not_found)

Or from the command line::

    urlshort run paths.yaml --port 8080
"""

import importlib

__version__ = "0.1.0"

# Public name -> defining module.  Resolved on first access so that
# ``import urlshort`` does not pull in PyYAML.
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "urlshort.errors",
    "MapHandler": "urlshort.handler",
    "MappingRecord": "urlshort.mapping",
    "ParseError": "urlshort.errors",
    "Redirect": "urlshort.http.response",
    "Request": "urlshort.http.request",
    "Response": "urlshort.http.response",
    "ShortenerConfig": "urlshort.config",
    "UrlshortError": "urlshort.errors",
    "file_handler": "urlshort.handler",
    "json_handler": "urlshort.handler",
    "load_mapping": "urlshort.mapping",
    "map_handler": "urlshort.handler",
    "not_found": "urlshort.handler",
    "parse_json": "urlshort.mapping",
    "parse_records": "urlshort.mapping",
    "parse_yaml": "urlshort.mapping",
    "yaml_handler": "urlshort.handler",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for the public API."""
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
