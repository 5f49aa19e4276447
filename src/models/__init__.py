from .api_schemas import ClosureRequest, ClosureResponse, HealthResponse, ErrorResponse

__all__ = ['ClosureRequest', 'ClosureResponse', 'HealthResponse', 'ErrorResponse']
