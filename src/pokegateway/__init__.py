"""PokeGateway - authenticated, cached façade over PokeAPI."""

__version__ = "0.1.0"
