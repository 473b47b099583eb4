"""
Utility functions shared by the Storefront services
"""


def mask_email(email: str) -> str:
    """
    Mask the local part of an email address for log output.
    """
    if not email or '@' not in email:
        return email
    local, _, domain = email.partition('@')
    if len(local) <= 2:
        return f"{local[:1]}***@{domain}"
    return f"{local[0]}***{local[-1]}@{domain}"
