"""
Announcements REST API client.
"""

from typing import List

from .base import BaseAPI
from ..models import Announcement


class AnnouncementsAPI(BaseAPI):
    """Site announcement endpoints."""

    async def get_announcements(self) -> List[Announcement]:
        return await self.transport.get("announcement", None, List[Announcement])
