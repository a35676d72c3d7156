from wikimacros.models.models import Attachment, Page, User

__all__ = ["Attachment", "Page", "User"]
