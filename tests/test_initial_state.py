import pytest
from composer import Composer, Field, FormData, FormDefinition, initial_state
from composer import Mode


def test_defaults_without_form_definition():
    s = initial_state()
    d = s.draft
    assert (d.title, d.description, d.button_text, d.number_of_pages) == ("Form Title", "", "Send", 1)
    assert d.fields == []
    assert d.current_page == 1
    assert s.mode == Mode.NONE and s.editing is None


def test_form_definition_values_win_and_only_none_is_missing():
    form = FormDefinition(title="", description="About you", button_text=None, number_of_pages=3)
    d = initial_state(form=form).draft
    assert d.title == ""
    assert d.description == "About you"
    assert d.button_text == "Send"
    assert d.number_of_pages == 3


def test_persisted_fields_beat_defaults_even_when_empty():
    defaults = [Field("d1", "input")]
    s = initial_state(fields=defaults, form_data=FormData(fields=[]))
    assert s.draft.fields == []

    s = initial_state(fields=defaults)
    assert [f.id for f in s.draft.fields] == ["d1"]


def test_config_draft_section_supplies_fallbacks():
    s = initial_state(defaults={"title": "Untitled", "button_text": "Submit"})
    assert s.draft.title == "Untitled"
    assert s.draft.button_text == "Submit"
    assert s.draft.description == ""


def test_create_uses_config_for_new_ids():
    cfg = {"fields": {"temp_id_prefix": "draft-", "content_type": "form"}, "draft": {}}
    c = Composer.create(form_type="lead", config=cfg)
    c.select_type("input")
    assert c.state.editing.id.startswith("draft-")
    assert c.draft.form_type == "lead"


def test_field_dict_shape_roundtrips_host_keys():
    f = Field.from_dict({"_id": "abc", "contentType": "form", "type": "select", "options": ["a", "b"]})
    assert f.id == "abc"
    assert f.payload == {"options": ["a", "b"]}
    assert f.to_dict() == {"_id": "abc", "contentType": "form", "type": "select", "options": ["a", "b"]}


@pytest.mark.parametrize("pages", [0, -1, 1.5, False])
def test_form_definition_page_count_must_be_at_least_one(pages):
    with pytest.raises(ValueError):
        initial_state(form=FormDefinition(number_of_pages=pages))


def test_form_definition_page_count_string_is_coerced():
    assert initial_state(form=FormDefinition(number_of_pages="2")).draft.number_of_pages == 2
