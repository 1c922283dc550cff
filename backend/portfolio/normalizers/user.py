def normalize_user(user):
    if user is None:
        return None

    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "isAdmin": bool(user.is_admin),
    }
