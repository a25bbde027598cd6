"""Hosting surfaces: the FastAPI app and serverless entrypoints."""
