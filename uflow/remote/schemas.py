"""
JSON Schema definitions for Structured Output

Keeps the model reply in the same shape as the local interpreter's result.
"""

# Note: strict=False because "structured" only appears for create intents
INTERPRETATION_RESPONSE_SCHEMA = {
    "name": "interpretation_response",
    "strict": False,
    "schema": {
        "type": "object",
        "properties": {
            "text": {
                "type": "string",
                "description": "Reply shown to the user, in the user's language"
            },
            "lang": {
                "type": "string",
                "enum": ["es", "en"],
                "description": "Detected language"
            },
            "intent": {
                "type": "string",
                "enum": ["create", "query", "unknown"],
                "description": "create = record something, query = conversation/analysis"
            },
            "structured": {
                "type": "object",
                "description": "Draft to create (only for intent=create)",
                "properties": {
                    "type": {
                        "type": "string",
                        "enum": ["transaction", "goal"]
                    },
                    "data": {
                        "type": "object",
                        "properties": {
                            "type": {"type": "string", "enum": ["income", "expense", "adjustment"]},
                            "amount": {"type": "number"},
                            "currency": {"type": "string", "enum": ["COP", "USD", "EUR"]},
                            "category": {"type": "string"},
                            "note": {"type": "string"},
                            "date": {"type": "string", "description": "ISO 8601 instant"},
                            "name": {"type": "string"},
                            "targetAmount": {"type": "number"}
                        }
                    }
                },
                "required": ["type", "data"]
            }
        },
        "required": ["text", "lang", "intent"]
    }
}
