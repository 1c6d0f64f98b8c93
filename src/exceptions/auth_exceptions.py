class AuthenticationException(Exception):
    """Base for all authentication provider failures"""

    pass


class AuthenticationDetailsException(AuthenticationException):
    def __init__(self, status_code: int, body: str):
        self.status_code: int = status_code
        self.body: str = body

        super().__init__(f"Failed to get credentials ({status_code}): {body}")
