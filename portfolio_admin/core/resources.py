"""
Resource definitions describe one kind of content record: its form fields,
how the list view groups it and the copy shown around it.
"""


class GroupSpec:
    def __init__(self, key, title, empty_message):
        self.key = key
        self.title = title
        self.empty_message = empty_message


class ResourceDefinition:
    """
    Args:
        name: API resource name ('projects', 'skills', 'experience')
        label: singular display label ('Project')
        fields: list of forms.fields.Field
        title_field: field shown as the row heading
        discriminant: record key used for grouping, or None for a single group
        groups: fixed GroupSpec list; None means groups are built from the data
        attachment_field: field holding an uploaded image reference, if any
    """

    def __init__(self, name, label, fields, title_field='title', discriminant=None,
                 groups=None, attachment_field=None, plural_label=None,
                 empty_title=None, empty_message=None):
        self.name = name
        self.label = label
        self.plural_label = plural_label or f"{label}s"
        self.fields = list(fields)
        self.title_field = title_field
        self.discriminant = discriminant
        self.groups = groups
        self.attachment_field = attachment_field
        self.empty_title = empty_title or f"No {self.plural_label.lower()} yet"
        self.empty_message = empty_message or f"Get started by adding your first {label.lower()}."

    def __repr__(self):
        return f"ResourceDefinition({self.name!r})"

    def field(self, name):
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)

    @property
    def field_names(self):
        return [f.name for f in self.fields]

    @property
    def required_fields(self):
        return [f for f in self.fields if f.required]
