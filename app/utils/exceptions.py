from fastapi import HTTPException, status


class NotAuthenticatedException(HTTPException):
    def __init__(self, detail: str = "Authentication required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ProfileAlreadyExistsException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail="Onboarding already completed for this user",
        )


class AdminGateClosedException(HTTPException):
    def __init__(self, detail: str = "Wrong password"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class AdminNotConfiguredException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Admin access is not configured",
        )


class OnboardingRequiredError(Exception):
    def __init__(self, user_id: int):
        self.user_id = user_id
