"""Email domain entity: an inbox message kept alongside the planner data."""


class Email:
    def __init__(self, id: int = 0, provider: str = "internal", sender: str = "", subject: str = "",
                 preview: str = "", body: str = "", time: str = "", read: bool = False):
        self.id = id
        self.provider = provider
        self.sender = sender
        self.subject = subject
        self.preview = preview
        self.body = body
        self.time = time
        self.read = read

    def __eq__(self, other):
        return isinstance(other, Email) and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.sender}: {self.subject}{'' if self.read else ' (unread)'}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Email from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "provider", "sender", "subject", "preview", "body", "time", "read"}
        return Email(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "provider": self.provider,
            "sender": self.sender,
            "subject": self.subject,
            "preview": self.preview,
            "body": self.body,
            "time": self.time,
            "read": self.read,
        }
