"""
Geocode API Lambda Function.

Encodes coordinates as four BIP-39 words and decodes them back.
Serves the web front end through API Gateway (proxy integration).
Supported actions: encode, decode, locate (coordinate from pasted text), size.
"""
import json
from typing import Dict, Any, List, Union

from b39geo import cell_size, decode, encode, load_wordlist
from b39geo.text import parse_coordinates, split_phrase
from shared.utils import setup_logger, get_env_var, create_response, parse_bool

# Initialize logger
logger = setup_logger(__name__)

# Configuration from environment variables
WORDLIST_LANGUAGE = get_env_var('B39GEO_WORDLIST_LANGUAGE', 'english')
DEFAULT_ROUNDING = get_env_var('B39GEO_DEFAULT_ROUNDING', 'nearest')
DECODE_CENTER = parse_bool(get_env_var('B39GEO_DECODE_CENTER', 'true'))


def parse_request(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Collect request parameters from the body or the query string.
    
    Args:
        event: API Gateway proxy event
        
    Returns:
        Parameter dictionary
    """
    body = event.get('body')
    if body:
        if isinstance(body, str):
            try:
                body = json.loads(body)
            except json.JSONDecodeError:
                raise ValueError("Request body is not valid JSON")
        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object")
        return body
    return event.get('queryStringParameters') or {}


def get_float(params: Dict[str, Any], key: str) -> float:
    """Read a required numeric parameter."""
    if params.get(key) is None:
        raise ValueError(f"Missing required parameter: {key}")
    try:
        return float(params[key])
    except (TypeError, ValueError):
        raise ValueError(f"Parameter {key} must be a number")


def get_words(params: Dict[str, Any]) -> List[str]:
    """Read the words parameter, given as a list or a space separated string."""
    words: Union[str, List[str], None] = params.get('words')
    if not words:
        raise ValueError("Missing required parameter: words")
    if isinstance(words, str):
        return split_phrase(words)
    return [str(word) for word in words]


def handle_encode(params: Dict[str, Any]) -> Dict[str, Any]:
    lat = get_float(params, 'lat')
    lon = get_float(params, 'lon')
    rounding = params.get('rounding') or DEFAULT_ROUNDING
    words = encode(lat, lon, rounding, wordlist=load_wordlist(WORDLIST_LANGUAGE))
    logger.info(f"Encoded coordinate to words: {' '.join(words)}")
    return create_response(200, {'words': ' '.join(words), 'lat': lat, 'lon': lon})


def handle_decode(params: Dict[str, Any]) -> Dict[str, Any]:
    words = get_words(params)
    center = parse_bool(params['center']) if 'center' in params else DECODE_CENTER
    coord = decode(words, center=center, wordlist=load_wordlist(WORDLIST_LANGUAGE))
    logger.info(f"Decoded {len(words)} words to ({coord.lat:.6f}, {coord.lon:.6f})")
    return create_response(200, {'lat': coord.lat, 'lon': coord.lon})


def handle_locate(params: Dict[str, Any]) -> Dict[str, Any]:
    text = params.get('text')
    if not text:
        raise ValueError("Missing required parameter: text")
    coord = parse_coordinates(str(text))
    if coord is None:
        logger.warning("No coordinate found in supplied text")
        return create_response(404, {'error': 'No coordinate found in text'})
    return handle_encode({'lat': coord.lat, 'lon': coord.lon, 'rounding': params.get('rounding')})


def handle_size(params: Dict[str, Any]) -> Dict[str, Any]:
    size = cell_size()
    return create_response(200, {'lat_degrees': size.lat_degrees, 'lon_degrees': size.lon_degrees})


ACTIONS = {
    'encode': handle_encode,
    'decode': handle_decode,
    'locate': handle_locate,
    'size': handle_size,
}


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for the geocode API.
    
    The action is taken from the path parameter 'action' or from the
    'action' request parameter.
    
    Returns:
        API Gateway response
    """
    try:
        logger.info("Geocode API Lambda invoked")
        
        params = parse_request(event)
        path_params = event.get('pathParameters') or {}
        action = (path_params.get('action') or params.get('action') or '').lower()
        
        handler = ACTIONS.get(action)
        if handler is None:
            return create_response(
                400,
                {'error': f"Unknown action: {action!r}. Expected one of: {', '.join(ACTIONS)}"}
            )
        
        return handler(params)
        
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return create_response(400, {'error': str(e)})
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return create_response(500, {'error': 'Internal server error'})
