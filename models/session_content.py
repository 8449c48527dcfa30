from datetime import datetime
from .database import db, isoformat

def _person(user):
    return {'id': user.id, 'name': user.name, 'email': user.email} if user else None

class SessionMessage(db.Model):
    """Chat message posted inside a mentorship relationship."""
    id = db.Column(db.Integer, primary_key=True)
    relationship_id = db.Column(db.Integer, db.ForeignKey('mentorship_relationship.id'), nullable=False)
    sender_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    sender = db.relationship('User')

    def to_dict(self):
        return {
            'id': self.id,
            'relationshipId': self.relationship_id,
            'senderId': self.sender_id,
            'sender': _person(self.sender),
            'content': self.content,
            'createdAt': isoformat(self.created_at),
        }


class SessionNote(db.Model):
    """Shared note attached to a mentorship relationship."""
    id = db.Column(db.Integer, primary_key=True)
    relationship_id = db.Column(db.Integer, db.ForeignKey('mentorship_relationship.id'), nullable=False)
    author_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    author = db.relationship('User')

    def to_dict(self):
        return {
            'id': self.id,
            'relationshipId': self.relationship_id,
            'authorId': self.author_id,
            'author': _person(self.author),
            'title': self.title,
            'content': self.content,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
