from clinic.models.intake import parse_intake, empty_intake, intake_form_fields, INTAKE_SCHEMA


def test_empty_intake_has_every_group():
    intake = empty_intake()

    assert set(intake) == set(INTAKE_SCHEMA)
    assert intake['dominant_hand'] is False
    assert intake['body_part']['right_knee'] is False
    assert intake['injuries']['main_group'] is None
    assert intake['pain_rating'] is None


def test_checkbox_answers():
    intake = parse_intake({'dominant_hand': 'on', 'right_knee': 'true', 'sharp': 'off'})

    assert intake['dominant_hand'] is True
    assert intake['body_part']['right_knee'] is True
    assert intake['quality']['sharp'] is False
    assert intake['latex_allergy'] is False


def test_form_field_names_map_into_groups():
    intake = parse_intake({
        'injury_group': 'AUTO ACCIDENT',
        'injury_kind': 'fall',
        'injury_date1': '2023-11-04',
        'symptoms_describe': 'Sharp pain when climbing stairs',
        'prior_problem_description': 'Sprain in 2019',
        'year3': '2020',
    })

    assert intake['injuries']['main_group'] == 'AUTO ACCIDENT'
    assert intake['injuries']['input_type'] == 'fall'
    assert intake['injuries']['date1'] == '2023-11-04'
    assert intake['symptoms']['describe'] == 'Sharp pain when climbing stairs'
    assert intake['symptoms']['year3'] == '2020'
    assert intake['prior_problem']['description'] == 'Sprain in 2019'


def test_enumerated_and_rating_answers_reject_unknown_values():
    intake = parse_intake({'injury_group': 'SPACE ACCIDENT', 'the_pain_is': 'Constant', 'pain_rating': '11'})

    assert intake['injuries']['main_group'] is None
    assert intake['the_pain_is'] == 'Constant'
    assert intake['pain_rating'] is None

    assert parse_intake({'pain_rating': '7'})['pain_rating'] == 7


def test_missing_text_answers_keep_current_value():
    current = parse_intake({'medications': 'Ibuprofen', 'tobacco': 'on'})

    updated = parse_intake({'occupation': 'Teacher'}, current=current)

    assert updated['medications'] == 'Ibuprofen'
    assert updated['occupation'] == 'Teacher'
    # an unticked checkbox is not submitted at all
    assert updated['tobacco'] is False


def test_form_fields_use_submitted_names():
    intake = parse_intake({'injury_comment': 'fell off ladder', 'neck': 'on'})
    fields = {field: (group, value) for group, field, _, value in intake_form_fields(intake)}

    assert fields['injury_comment'] == ('injuries', 'fell off ladder')
    assert fields['neck'] == ('body_part', True)
    assert fields['medications'] == (None, None)
