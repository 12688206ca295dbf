

class PokedexError(Exception):
    """Base exception for all pokedex_browser errors"""
    pass

class ConfigError(PokedexError):
    """Invalid or inconsistent global.json or environment override"""
    pass

class FetchError(PokedexError):
    """
    A request to the data source failed. The message is shown to the
    user as-is, so keep it human-readable.
    """
    pass

class ListFetchError(FetchError):
    """The record list or type list request failed or returned a non-success status"""
    pass

class DetailFetchError(FetchError):
    """A per-record detail request failed or returned an unusable payload"""
    pass
