"""Partial updates driven by commands.

Update commands leave out the fields they don't change (``None``) and name
the optional fields to empty in ``clear``.
"""

from protean.exceptions import ValidationError


def requested_changes(command, fields, clearable=()) -> dict:
    """Keyword arguments for an aggregate's ``update`` from an update command."""
    changes = {name: getattr(command, name) for name in fields if getattr(command, name) is not None}
    for name in command.clear or []:
        if name not in clearable:
            raise ValidationError({name: [f"{name.replace('_', ' ').capitalize()} cannot be cleared"]})
        changes[name] = None
    return changes


def update_fields(request) -> dict:
    """Update command arguments from a request model.

    Fields the client sent as ``null`` go to ``clear``; fields it left out
    are not passed at all.
    """
    sent = request.model_dump(exclude_unset=True)
    fields = {name: value for name, value in sent.items() if value is not None}
    cleared = sorted(name for name, value in sent.items() if value is None)
    if cleared:
        fields["clear"] = cleared
    return fields
