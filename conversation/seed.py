"""Messages every new conversation view starts with."""

from conversation.models import Attachment, Message, Reply, User

_AUTOPRODUCTS = User(name="autoproducts", role="autoproducts")
_ADMIN = User(name="Admin", role="Admin")
_ALICE = User(name="Alice Freeman", role="Project Manager")
_YOU = User(name="You", role="Developer")


def seed_messages() -> list[Message]:
    """Return a fresh copy of the seeded conversation (ids 1-5)."""
    return [
        Message(
            id=1,
            user=_AUTOPRODUCTS,
            content=["Test", "Description"],
            timestamp="October 15, 2025 9:50 AM",
        ),
        Message(
            id=2,
            user=_ADMIN,
            content=[
                "Please review the attached specification document for V1.",
                "Let me know if you have any questions.",
            ],
            timestamp="October 15, 2025 9:46 AM",
            variant="highlighted",
            attachments=[Attachment(name="specification-v1.pdf", size="1.2 MB")],
        ),
        Message(
            id=3,
            user=_ALICE,
            content=[
                "The initial specs look good. I've added a few notes in the shared "
                "document. Please proceed with the component mockups."
            ],
            timestamp="October 15, 2025 9:55 AM",
        ),
        Message(
            id=4,
            user=_YOU,
            content=["Understood. I will start working on the mockups and provide an update by EOD."],
            timestamp="October 15, 2025 10:05 AM",
            variant="reply",
            reply_to=Reply(sender_name="Alice Freeman", content="The initial specs look good..."),
        ),
        Message(
            id=5,
            user=_ALICE,
            content=["Perfect, thank you!"],
            timestamp="October 15, 2025 10:07 AM",
        ),
    ]
