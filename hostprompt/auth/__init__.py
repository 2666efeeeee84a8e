from hostprompt.auth.utils import current_user_id, ensure_owner  # noqa: F401
