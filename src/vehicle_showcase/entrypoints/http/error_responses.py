"""REST API error response models.

Every HTTP error shares one body shape: the numeric status, the message(s)
and the status phrase.
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (message is a single string)
    - Multi-rule validation errors (message is the ordered list of violations)

    Examples:
        Not found:
            {
                "statusCode": 404,
                "message": "Vehicle with id '999' not found",
                "error": "Not Found"
            }

        Validation error with multiple violations:
            {
                "statusCode": 400,
                "message": [
                    "page must not be less than 1",
                    "page must be an integer number",
                    "limit must not be less than 1"
                ],
                "error": "Bad Request"
            }
    """

    status_code: int = Field(alias="statusCode")
    message: str | list[str]
    error: str

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "statusCode": 404,
                    "message": "Vehicle with id '999' not found",
                    "error": "Not Found",
                },
                {
                    "statusCode": 400,
                    "message": [
                        "page must not be less than 1",
                        "page must be an integer number",
                        "limit must not be less than 1",
                    ],
                    "error": "Bad Request",
                },
            ]
        },
    )
