"""Test fixtures for OtterTS tests.

This module provides sample schema documents and utilities for testing the
declaration generator.
"""

# Minimal document that passes the shape check
MINIMAL_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
    'paths': {},
}

# Document without paths or components
SHAPELESS_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'No Paths', 'version': '1.0.0'},
}

PET_COMPONENT_SPEC = {
    'components': {
        'schemas': {
            'Pet': {
                'type': 'object',
                'properties': {
                    'id': {'type': 'integer'},
                    'name': {'type': 'string'},
                },
                'required': ['id'],
            }
        }
    }
}

# Petstore-like API with models and multiple endpoints
PETSTORE_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Petstore API', 'version': '1.0.0'},
    'paths': {
        '/pets': {
            'get': {
                'operationId': 'listPets',
                'description': 'List all pets',
                'parameters': [
                    {
                        'name': 'limit',
                        'in': 'query',
                        'description': 'Maximum number of pets to return',
                        'required': False,
                        'schema': {'type': 'integer', 'format': 'int32'},
                    },
                ],
                'responses': {
                    '200': {
                        'description': 'A list of pets',
                        'content': {
                            'application/json': {
                                'schema': {
                                    'type': 'array',
                                    'items': {'$ref': '#/components/schemas/Pet'},
                                }
                            }
                        },
                    }
                },
            },
            'post': {
                'requestBody': {
                    'required': True,
                    'content': {
                        'application/json': {
                            'schema': {'$ref': '#/components/schemas/CreatePetRequest'}
                        }
                    },
                },
                'responses': {
                    '201': {
                        'description': 'Pet created',
                        'content': {
                            'application/json': {
                                'schema': {'$ref': '#/components/schemas/Pet'}
                            }
                        },
                    },
                },
            },
        },
        '/pets/{petId}': {
            'delete': {
                'operationId': 'deletePet',
                'parameters': [
                    {
                        'name': 'petId',
                        'in': 'path',
                        'required': True,
                        'schema': {'type': 'integer', 'format': 'int64'},
                    }
                ],
                'responses': {
                    '204': {'description': 'Pet deleted'},
                    'default': {
                        'content': {
                            'application/json': {
                                'schema': {'$ref': '#/components/schemas/Error'}
                            }
                        },
                    },
                },
            },
        },
    },
    'components': {
        'schemas': {
            'Pet': {
                'type': 'object',
                'required': ['id', 'name'],
                'properties': {
                    'id': {'type': 'integer', 'format': 'int64'},
                    'name': {'type': 'string'},
                    'status': {
                        'type': 'string',
                        'enum': ['available', 'pending', 'sold'],
                    },
                },
            },
            'CreatePetRequest': {
                'type': 'object',
                'required': ['name'],
                'properties': {
                    'name': {'type': 'string'},
                    'tag': {'type': 'string', 'nullable': True},
                },
            },
            'Error': {
                'type': 'object',
                'required': ['code', 'message'],
                'properties': {
                    'code': {'type': 'integer', 'format': 'int32'},
                    'message': {'type': 'string'},
                },
            },
        }
    },
}

# Two paths sharing one named operation
SHARED_OPERATION_SPEC = {
    'paths': {
        '/v1/status': {
            'get': {
                'operationId': 'getStatus',
                'description': 'Service status',
                'responses': {'200': {'description': 'OK'}},
            }
        },
        '/v2/status': {
            'get': {
                'operationId': 'getStatus',
                'responses': {'503': {'description': 'Unavailable'}},
            }
        },
    }
}

# API with referenced and shared parameters
PARAMETERS_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Parameters API', 'version': '1.0.0'},
    'paths': {
        '/items/{itemId}': {
            'parameters': [
                {
                    'name': 'itemId',
                    'in': 'path',
                    'required': True,
                    'schema': {'type': 'string'},
                },
            ],
            'get': {
                'parameters': [
                    {'$ref': '#/components/parameters/limit'},
                    {'$ref': '#/components/parameters/traceId'},
                    {'name': 'session', 'in': 'cookie', 'schema': {'type': 'string'}},
                ],
                'responses': {'200': {'description': 'Success'}},
            },
        }
    },
    'components': {
        'parameters': {
            'limit': {
                'name': 'limit',
                'in': 'query',
                'required': False,
                'schema': {'type': 'integer'},
            },
            'traceId': {
                'name': 'X-Trace-Id',
                'in': 'header',
                'required': True,
                'description': 'Request trace id',
                'schema': {'type': 'string'},
            },
        }
    },
}

# Schemas pointing into other documents
EXTERNAL_REFS_SPEC = {
    'components': {
        'schemas': {
            'Order': {
                'type': 'object',
                'properties': {
                    'widget': {'$ref': 'other.json#/Widget'},
                    'gadget': {'$ref': 'other.json#/Gadget'},
                    'shared': {'$ref': 'shared.yaml'},
                },
            }
        }
    }
}

# A flat map of schema definitions for raw-schema mode
RAW_SCHEMA_SPEC = {
    'Pet': {
        'type': 'object',
        'properties': {
            'name': {'type': 'string'},
            'parent': {'$ref': '#/Pet'},
        },
    },
    'Tag': {'type': 'string'},
}


def get_spec_as_json(spec: dict) -> str:
    """Convert a spec dictionary to JSON string."""
    import json

    return json.dumps(spec, indent=2)


def get_spec_as_yaml(spec: dict) -> str:
    """Convert a spec dictionary to YAML string."""
    import yaml

    return yaml.dump(spec, default_flow_style=False, sort_keys=False)
