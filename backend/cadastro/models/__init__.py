from cadastro.models.registration import Registration

__all__ = ["Registration"]
