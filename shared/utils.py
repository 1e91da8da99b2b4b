"""
Shared utilities for Lambda functions.

Logging and environment helpers come from the b39geo package; this module
adds the API Gateway response builder.
"""
import json
from typing import Dict, Any, Optional

from b39geo.utils import get_env_var, parse_bool, setup_logger

__all__ = ['create_response', 'get_env_var', 'parse_bool', 'setup_logger']


def create_response(
    status_code: int,
    body: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Build an API Gateway proxy response with a JSON body.
    
    Args:
        status_code: HTTP status code
        body: Response body dictionary (or an already serialized string)
        headers: Extra headers merged over the defaults
        
    Returns:
        API Gateway formatted response
    """
    response_headers = {
        'Content-Type': 'application/json; charset=utf-8',
        'Access-Control-Allow-Origin': '*',
    }
    if headers:
        response_headers.update(headers)
    
    return {
        'statusCode': status_code,
        'headers': response_headers,
        'body': body if isinstance(body, str) else json.dumps(body, ensure_ascii=False)
    }
