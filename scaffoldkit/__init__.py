"""Service building blocks: MongoDB filter builders, HTTP and Ollama clients,
console logging, a Flask app with CORS, SQL helpers and workspace scaffolding."""

__version__ = "0.1.0"