from utils.get_endpoint import api_path, get_endpoint, query_params
from utils.response_utils import extract_error_message, robust_parse_text

__all__ = ["api_path", "get_endpoint", "query_params", "extract_error_message", "robust_parse_text"]
