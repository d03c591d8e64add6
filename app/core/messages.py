"""User-facing message catalog, keyed by error code, in the configured locale."""

from app.core.config import settings

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "VALIDATION_FAILED": "Request validation failed.",
        "ACCESS_DENIED": "Access denied.",
        "NOT_FOUND": "Resource not found.",
        "CONFLICT": "Resource already exists.",
        "PASSWORDS_DO_NOT_MATCH": "Passwords do not match",
        "PASSWORD_LENGTH_INVALID": "Password must be 8-128 characters.",
        "EMAIL_IN_USE": "Email already in use",
        "ADMIN_CREATE_DENIED": "Access denied. Only admins can create other admins.",
        "ADMIN_REQUIRED": "Access denied. Admin access required.",
        "ROLE_UPDATE_DENIED": "Access denied. Only admins can update user role.",
        "PROFILE_UPDATE_DENIED": "Access denied. You can only update your own profile.",
        "PROFILE_DELETE_DENIED": "Access denied. You can only delete your own account.",
        "USER_NOT_EXISTS": "User not found.",
        "PASSWORD_INVALID": "Invalid password.",
        "NOT_AUTHENTICATED": "Not authenticated",
        "TOKEN_INVALID": "Invalid or expired token",
        "USER_CREATED": "User created successfully",
        "USER_DELETED": "User successfully deleted.",
        "INTERNAL_ERROR": "An internal error occurred",
        "USERS_READ_FAILED": "An error occurred while retrieving the users. Please try again later.",
        "USER_READ_FAILED": "An error occurred while retrieving the user. Please try again later.",
        "USER_CREATE_FAILED": "An error occurred while creating the user. Please try again later.",
        "USER_UPDATE_FAILED": "An error occurred while updating the user. Please try again later.",
        "USER_DELETE_FAILED": "An error occurred while deleting the user. Please try again later.",
    },
    "es": {
        "VALIDATION_FAILED": "La solicitud no es válida.",
        "ACCESS_DENIED": "Acceso denegado.",
        "NOT_FOUND": "Recurso no encontrado.",
        "CONFLICT": "El recurso ya existe.",
        "PASSWORDS_DO_NOT_MATCH": "Las contraseñas no coinciden",
        "PASSWORD_LENGTH_INVALID": "La contraseña debe tener entre 8 y 128 caracteres.",
        "EMAIL_IN_USE": "El correo electrónico ya está en uso",
        "ADMIN_CREATE_DENIED": "Acceso denegado. Solo los administradores pueden crear otros administradores.",
        "ADMIN_REQUIRED": "Acceso denegado. Se requiere rol de administrador.",
        "ROLE_UPDATE_DENIED": "Acceso denegado. Solo los administradores pueden cambiar el rol.",
        "PROFILE_UPDATE_DENIED": "Acceso denegado. Solo puedes editar tu propio perfil.",
        "PROFILE_DELETE_DENIED": "Acceso denegado. Solo puedes eliminar tu propia cuenta.",
        "USER_NOT_EXISTS": "Usuario no encontrado.",
        "PASSWORD_INVALID": "Contraseña incorrecta.",
        "NOT_AUTHENTICATED": "No autenticado",
        "TOKEN_INVALID": "Token inválido o expirado",
        "USER_CREATED": "Usuario creado correctamente",
        "USER_DELETED": "Usuario eliminado correctamente.",
        "INTERNAL_ERROR": "Se produjo un error interno",
        "USERS_READ_FAILED": "Se produjo un error al obtener los usuarios. Inténtalo más tarde.",
        "USER_READ_FAILED": "Se produjo un error al obtener el usuario. Inténtalo más tarde.",
        "USER_CREATE_FAILED": "Se produjo un error al crear el usuario. Inténtalo más tarde.",
        "USER_UPDATE_FAILED": "Se produjo un error al actualizar el usuario. Inténtalo más tarde.",
        "USER_DELETE_FAILED": "Se produjo un error al eliminar el usuario. Inténtalo más tarde.",
    },
}


def message(code: str, locale: str | None = None) -> str:
    """Return the text for code in locale (default: MESSAGES_LOCALE), falling back to English."""
    catalog = MESSAGES.get(locale or settings.MESSAGES_LOCALE, MESSAGES["en"])
    return catalog.get(code) or MESSAGES["en"].get(code, code)
