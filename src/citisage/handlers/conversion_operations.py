"""
Lambda function for statement conversion operations.
"""
import logging
from typing import Dict, Any

from citisage.services.csv_processor_service import process_document
from citisage.services.export_service import serialize_output
from citisage.utils.converter_config import ConverterConfig
from citisage.utils.file_validator import validate_csv_structure, validate_file
from citisage.utils.lambda_utils import (
    create_response,
    get_route_key,
    handle_error,
    mandatory_body_parameter,
    optional_body_parameter,
)

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

DEFAULT_FILE_NAME = 'statement.csv'


def _csv_content(event: Dict[str, Any]) -> str:
    """Return the csvContent body parameter. Raises KeyError when it is missing or not text."""
    csv_content = mandatory_body_parameter(event, 'csvContent')
    if not isinstance(csv_content, str):
        raise KeyError("csvContent must be a string")
    return csv_content


def convert_statement_handler(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert the CitiBank CSV text in the request body.

    Args:
        event: API Gateway Lambda proxy event with body {"csvContent": str, "fileName": str}

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        csv_content = _csv_content(event)
        file_name = optional_body_parameter(event, 'fileName') or DEFAULT_FILE_NAME
    except KeyError:
        return handle_error(400, "csvContent is required")
    except ValueError as e:
        return handle_error(400, str(e))
    if not isinstance(file_name, str):
        return handle_error(400, "fileName must be a string")

    try:
        config = ConverterConfig.from_environment()
        file_check = validate_file(file_name, len(csv_content.encode('utf-8')), config)
        if not file_check.is_valid:
            return create_response(400, {
                "message": "File validation failed",
                "validation": file_check.model_dump(by_alias=True)
            })

        result = process_document(csv_content)
        logger.info(f"Converted {file_name}: success={result.success}, rows={len(result.data)}")

        output_csv = serialize_output(result.data) if result.data else None
        return create_response(200, {
            "result": result.to_dict(),
            "outputCsv": output_csv,
            "outputFileName": config.generate_output_filename(file_name) if output_csv is not None else None
        })
    except ValueError as e:
        return handle_error(400, str(e))


def validate_statement_handler(event: Dict[str, Any]) -> Dict[str, Any]:
    """Run the structure checks on the CitiBank CSV text in the request body."""
    try:
        csv_content = _csv_content(event)
    except KeyError:
        return handle_error(400, "csvContent is required")
    except ValueError as e:
        return handle_error(400, str(e))

    validation = validate_csv_structure(csv_content)
    return create_response(200, {"validation": validation.model_dump(by_alias=True)})


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Main handler for conversion operations.

    Args:
        event (Dict[str, Any]): API Gateway Lambda Proxy Input Format
        context (Any): Lambda Context runtime methods and attributes

    Returns:
        Dict[str, Any]: API Gateway Lambda Proxy Output Format
    """
    logger.info("starting conversion handler")

    if event and event.get("requestContext", {}).get("http", {}).get("method") == "OPTIONS":
        return create_response(200, {"message": "OK"})

    route_key = get_route_key(event or {})
    try:
        if route_key == 'POST /conversions':
            return convert_statement_handler(event)
        elif route_key == 'POST /conversions/validate':
            return validate_statement_handler(event)
        else:
            return handle_error(400, f"Unsupported route {route_key}")

    except Exception as e:
        logger.error(f"Error in conversion handler: {str(e)}")
        return handle_error(500, "Internal server error")
