"""
Currency App - Exchange Rates and Conversion

Converts subscription amounts between the supported currencies using
exchange rates fetched from a public API and cached for one hour. When the
API is unreachable a hard-coded fallback table keeps conversions working.
"""
