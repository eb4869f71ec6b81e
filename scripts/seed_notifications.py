"""
Script to add sample important notifications
"""

import sys
import asyncio
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from placement_portal.database import connect_db, disconnect_db
from placement_portal.services.notification_service import important_notification_service

SAMPLE_NOTIFICATIONS = [
    {"title": "Placement Registration Open", "type": "URGENT", "link": "/placements/register"},
    {"title": "Resume Building Workshop", "type": "NEW", "link": "/workshops/resume-building"},
    {"title": "Mock Interview Sessions", "type": "INFO", "link": "/interviews/mock"},
    {"title": "Final Year Project Submission Deadline", "type": "URGENT", "link": "/projects/submit"},
    {"title": "Industry Expert Talk - AI in Software Development", "type": "EVENT", "link": "/events/ai-talk"},
]


async def seed_notifications():
    await connect_db()
    try:
        print("Adding sample important notifications...")
        for notification in SAMPLE_NOTIFICATIONS:
            await important_notification_service.create(notification)
            print(f"Added: {notification['title']}")
        print("✅ Sample notifications added successfully!")
    finally:
        await disconnect_db()


if __name__ == "__main__":
    asyncio.run(seed_notifications())
