from hsjwt.models.claims import Claims

__all__ = ["Claims"]
