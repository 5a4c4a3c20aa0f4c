import pytest
from palette import FieldPalette


def test_resolve_token_and_get_spec(palette):
    # Aliases should map to type_id
    assert palette.resolve_token("dropdown") == "select"
    assert palette.resolve_token("checkbox") == "check"
    assert palette.resolve_token("tel") == "phone"

    # type_id and label are also valid tokens
    assert palette.resolve_token("multiSelect") == "multiSelect"
    assert palette.resolve_token("text area") == "textarea"
    assert palette.resolve_token("nope") is None
    assert palette.resolve_token("") is None

    assert palette.get_spec("email")["label"] == "Email"
    assert palette.get_spec("unknown") == {}


def test_choices_filter_by_form_type(palette):
    lead = palette.choices("lead")
    other = palette.choices("feedback")
    assert "email" in lead and "firstName" in lead
    assert "email" not in other
    assert "input" in other and "input" in lead
    assert lead.index("input") < lead.index("select")


def test_extra_specs_override_and_extend():
    pal = FieldPalette(extra_specs={
        "rating": {"label": "Rating", "aliases": ["stars"]},
        "email": {"label": "E-mail address", "form_types": "lead"},
    })
    assert pal.resolve_token("stars") == "rating"
    assert "rating" in pal.choices("anything")
    assert pal.get_spec("email")["label"] == "E-mail address"
    assert pal.get_spec("email")["form_types"] == ["lead"]


def test_yaml_plugins_loaded(tmp_path):
    (tmp_path / "one.yaml").write_text(
        "type_id: signature\nlabel: Signature\naliases: [sign]\n", encoding="utf-8"
    )
    (tmp_path / "many.yaml").write_text(
        "components:\n"
        "  - type_id: map\n"
        "    label: Location\n"
        "  - type_id: slider\n"
        "    form_types: [survey]\n",
        encoding="utf-8",
    )
    pal = FieldPalette(plugins_dir=tmp_path)
    assert pal.resolve_token("sign") == "signature"
    assert pal.resolve_token("location") == "map"
    assert "slider" in pal.choices("survey")
    assert "slider" not in pal.choices("lead")


def test_yaml_plugin_without_type_id_rejected(tmp_path):
    (tmp_path / "bad.yaml").write_text("label: Broken\n", encoding="utf-8")
    with pytest.raises(ValueError):
        FieldPalette(plugins_dir=tmp_path)


def test_from_config_reads_plugins_dir(tmp_path):
    (tmp_path / "one.yaml").write_text("type_id: signature\n", encoding="utf-8")
    pal = FieldPalette.from_config({"palette": {"plugins_dir": str(tmp_path)}})
    assert pal.resolve_token("signature") == "signature"


@pytest.mark.parametrize("body", [
    "- type_id: x\n",
    "just a string\n",
    "components: [signature]\n",
    "components: signature\n",
    "type_id: rating\naliases: stars\n",
    "type_id: rating\nform_types: {lead: 1}\n",
    "type_id: [rating]\n",
])
def test_malformed_yaml_plugin_rejected(tmp_path, body):
    (tmp_path / "bad.yaml").write_text(body, encoding="utf-8")
    with pytest.raises(ValueError, match="bad.yaml"):
        FieldPalette(plugins_dir=tmp_path)


def test_empty_yaml_plugin_ignored(tmp_path):
    (tmp_path / "empty.yaml").write_text("", encoding="utf-8")
    pal = FieldPalette(plugins_dir=tmp_path)
    assert pal.resolve_token("input") == "input"
