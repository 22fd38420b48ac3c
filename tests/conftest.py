"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_openapi():
    """Sample OpenAPI document with generator-style nullable unions."""
    return {
        "openapi": "3.0.3",
        "info": {"title": "Agents API", "version": "1.0.0"},
        "paths": {
            "/agents/{id}": {
                "get": {
                    "parameters": [
                        {
                            "name": "team",
                            "in": "query",
                            "schema": {"anyOf": [{"type": "string"}, {"type": "null"}]}
                        }
                    ],
                    "responses": {
                        "200": {
                            "description": "OK",
                            "content": {
                                "application/json": {
                                    "schema": {"$ref": "#/components/schemas/Agent"}
                                }
                            }
                        }
                    }
                }
            }
        },
        "components": {
            "schemas": {
                "Agent": {
                    "type": "object",
                    "required": ["id", "name"],
                    "properties": {
                        "id": {"type": "string", "format": "uuid"},
                        "name": {"type": "string"},
                        "description": {
                            "anyOf": [{"type": "string", "maxLength": 500}, {"type": "null"}],
                            "description": "Free-form notes"
                        },
                        "limit": {
                            "anyOf": [{"type": "null"}, {"type": "integer", "minimum": 0}]
                        },
                        "labels": {
                            "type": "array",
                            "items": {"type": "string"}
                        }
                    }
                }
            }
        }
    }


@pytest.fixture
def sample_openapi_file(temp_dir, sample_openapi):
    """Write the sample OpenAPI document to a file and return its path."""
    path = temp_dir / "openapi.json"
    path.write_text(json.dumps(sample_openapi), encoding="utf-8")
    return path
