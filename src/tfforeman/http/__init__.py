from tfforeman.http.transport import ForemanTransport

__all__ = ["ForemanTransport"]
