import copy

import pytest

PETSTORE = {
    "swagger": "2.0",
    "info": {"title": "Petstore", "version": "1.0.0", "description": "Pet store API"},
    "host": "petstore.example.com",
    "basePath": "/v1/",
    "schemes": ["https", "http"],
    "produces": ["application/json"],
    "consumes": ["application/json", "application/xml"],
    "securityDefinitions": {
        "petstore_auth": {"type": "oauth2", "flow": "implicit"},
        "api_key": {"type": "apiKey", "name": "api_key", "in": "header"},
    },
    "parameters": {
        "limitParam": {
            "name": "limit",
            "in": "query",
            "type": "integer",
            "required": False,
        },
        "traceHeader": {
            "name": "X-Trace-Id",
            "in": "header",
            "type": "string",
            "x-proxy-header": True,
        },
    },
    "paths": {
        "/pets": {
            "get": {
                "operationId": "pets.list-all",
                "summary": "List pets",
                "parameters": [
                    {"$ref": "#/parameters/limitParam"},
                    {
                        "name": "filter",
                        "in": "query",
                        "type": "string",
                        "x-name-pattern": "filter[*]",
                    },
                ],
                "responses": {
                    "200": {
                        "description": "A list of pets",
                        "schema": {"type": "array", "items": {"$ref": "#/definitions/Pet"}},
                    }
                },
            },
            "post": {
                "description": "Create a pet",
                "security": [{"petstore_auth": ["write:pets"]}],
                "parameters": [
                    {
                        "name": "pet",
                        "in": "body",
                        "required": True,
                        "schema": {"$ref": "#/definitions/NewPet"},
                    }
                ],
                "responses": {"201": {"description": "Created"}},
            },
        },
        "/pets/{id}": {
            "parameters": [
                {"name": "id", "in": "path", "required": True, "type": "string"}
            ],
            "get": {
                "responses": {
                    "200": {"description": "A pet", "schema": {"$ref": "#/definitions/Pet"}}
                }
            },
            "delete": {
                "security": [{"api_key": []}],
                "parameters": [
                    {"$ref": "#/parameters/traceHeader"},
                    {
                        "name": "internal",
                        "in": "query",
                        "type": "boolean",
                        "x-exclude-from-bindings": True,
                    },
                ],
                "responses": {"204": {"description": "Deleted"}},
            },
        },
    },
    "definitions": {
        "Pet": {
            "type": "object",
            "description": "A pet",
            "required": ["id", "name"],
            "properties": {
                "id": {"type": "integer", "format": "int64"},
                "name": {"type": "string"},
                "tag": {"type": "string"},
                "owner": {"$ref": "#/definitions/pet-owner"},
            },
        },
        "NewPet": {
            "type": "object",
            "properties": {"name": {"type": "string"}},
        },
        "pet-owner": {
            "type": "object",
            "properties": {"email": {"type": "string"}},
        },
    },
}


@pytest.fixture
def petstore():
    """Копия petstore-спецификации, которую тест может менять"""
    return copy.deepcopy(PETSTORE)
