CURRENT_USER_KEY = "current_user"

ERROR_USER_ID_EMPTY = "user id cannot be empty"
