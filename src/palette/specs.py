"""
Built-in field types offered by the palette.
Spec shape per type_id:
{
  "label": "Text input",
  "aliases": ["token1", "token2", ...],
  "form_types": ["lead", ...]   # empty = offered for every form type
}
"""

BUILTIN_FIELD_TYPES = {
    # ---------- generic inputs ----------
    "input": {
        "label": "Text input",
        "aliases": ["text", "textinput", "line"],
        "form_types": [],
    },
    "textarea": {
        "label": "Text area",
        "aliases": ["paragraph", "multiline"],
        "form_types": [],
    },
    "number": {
        "label": "Number",
        "aliases": ["num", "int"],
        "form_types": [],
    },
    "date": {
        "label": "Date",
        "aliases": ["day"],
        "form_types": [],
    },

    # ---------- choices ----------
    "select": {
        "label": "Select",
        "aliases": ["dropdown"],
        "form_types": [],
    },
    "multiSelect": {
        "label": "Multiple select",
        "aliases": ["multiselect", "multi"],
        "form_types": [],
    },
    "check": {
        "label": "Checkbox",
        "aliases": ["checkbox", "checkboxes"],
        "form_types": [],
    },
    "radio": {
        "label": "Radio button",
        "aliases": ["radios", "option"],
        "form_types": [],
    },

    # ---------- misc ----------
    "file": {
        "label": "File upload",
        "aliases": ["upload", "attachment"],
        "form_types": [],
    },
    "html": {
        "label": "HTML",
        "aliases": ["richtext"],
        "form_types": [],
    },

    # ---------- contact fields (lead forms only) ----------
    "email": {
        "label": "Email",
        "aliases": ["mail", "e-mail"],
        "form_types": ["lead"],
    },
    "phone": {
        "label": "Phone",
        "aliases": ["tel", "telephone"],
        "form_types": ["lead"],
    },
    "firstName": {
        "label": "First name",
        "aliases": ["firstname", "first"],
        "form_types": ["lead"],
    },
    "lastName": {
        "label": "Last name",
        "aliases": ["lastname", "last", "surname"],
        "form_types": ["lead"],
    },
    "company": {
        "label": "Company",
        "aliases": ["companyname", "organization"],
        "form_types": ["lead"],
    },
}
