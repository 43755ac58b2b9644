class ApiError(Exception):
    """Базовая ошибка операций API"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCredentials(ApiError):
    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class DuplicateEmail(ApiError):
    def __init__(self, message: str = "User with this email already exists"):
        super().__init__(message)


class NotFound(ApiError):
    """Сущность с указанным идентификатором отсутствует"""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class Unauthenticated(ApiError):
    def __init__(self, action: str = "perform this action"):
        super().__init__(f"You must be logged in to {action}")


class ValidationFailed(ApiError):
    pass
