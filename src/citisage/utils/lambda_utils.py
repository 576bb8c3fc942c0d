from typing import Dict, Any, Optional
import json


def create_response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Create a standardized API response."""
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": "Content-Type,Authorization",
            "Access-Control-Allow-Methods": "POST,OPTIONS"
        },
        "body": json.dumps(body)
    }


def handle_error(status_code: int, message: str) -> Dict[str, Any]:
    """Create a standardized error response."""
    return create_response(status_code, {"message": message})


def get_route_key(event: Dict[str, Any]) -> str:
    """Return the API Gateway route key, e.g. 'POST /conversions'."""
    route_key = event.get('routeKey')
    if route_key:
        return route_key
    http = event.get('requestContext', {}).get('http', {})
    return f"{http.get('method', '')} {http.get('path', '')}".strip()

# extract parameters from json payload body
def parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """Decode the JSON body of the event. Raises ValueError on malformed JSON."""
    body = event.get('body') or '{}'
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        raise ValueError(f"Request body is not valid JSON: {str(e)}") from e
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object")
    return parsed

def optional_body_parameter(event: Dict[str, Any], parameter_name: str) -> Optional[Any]:
    """Extract a json-encoded body parameter from the event."""
    return parse_body(event).get(parameter_name)

def mandatory_body_parameter(event: Dict[str, Any], parameter_name: str) -> Any:
    """Extract a mandatory json-encoded body parameter from the event."""
    parameter_value = optional_body_parameter(event, parameter_name)
    if not parameter_value:
        raise KeyError(f"Body parameter {parameter_name} is required")
    return parameter_value
