from models import db, SessionMessage, SessionNote
from .errors import BadRequest, Forbidden, NotFound
from .mentorship import get_participant_relationship


def list_messages(caller, relationship_id):
    relationship = get_participant_relationship(caller, relationship_id)
    return (SessionMessage.query.filter_by(relationship_id=relationship.id)
            .order_by(SessionMessage.created_at.asc(), SessionMessage.id.asc()).all())


def post_message(caller, relationship_id, content):
    if not content or not content.strip():
        raise BadRequest('Message content is required')
    relationship = get_participant_relationship(caller, relationship_id)

    message = SessionMessage(relationship_id=relationship.id, sender_id=caller.user_id, content=content)
    db.session.add(message)
    db.session.commit()
    return message


def list_notes(caller, relationship_id):
    relationship = get_participant_relationship(caller, relationship_id)
    return (SessionNote.query.filter_by(relationship_id=relationship.id)
            .order_by(SessionNote.updated_at.desc(), SessionNote.id.desc()).all())


def create_note(caller, relationship_id, title, content):
    if not title or not content:
        raise BadRequest('Title and content are required')
    relationship = get_participant_relationship(caller, relationship_id)

    note = SessionNote(relationship_id=relationship.id, author_id=caller.user_id,
                       title=title, content=content)
    db.session.add(note)
    db.session.commit()
    return note


def update_note(caller, relationship_id, note_id, title, content):
    """Only the author may edit a note"""
    if not note_id or not title or not content:
        raise BadRequest('Note ID, title and content are required')
    relationship = get_participant_relationship(caller, relationship_id)

    note = db.session.get(SessionNote, note_id)
    if note is None or note.relationship_id != relationship.id:
        raise NotFound('Note not found')
    if note.author_id != caller.user_id:
        raise Forbidden('You can only edit your own notes')

    note.title = title
    note.content = content
    db.session.commit()
    return note
