# /clinic/models/intake.py
"""Patient intake questionnaire.

The questionnaire is stored on the patient as one JSON document whose shape
is fixed by ``INTAKE_SCHEMA``. Leaves describe how a single answer is read
from the submitted form; nested dicts are question groups. Form field names
are flat, so a leaf may name a field other than its storage key.
"""
from clinic.utils.forms import is_checked, parse_date

BOOLEAN = 'boolean'
TEXT = 'text'
DATE = 'date'
CHOICE = 'choice'
RATING = 'rating'

INJURY_GROUPS = ['NO INJURY', 'INJURY', 'INJURY AT WORK', 'WORK RELATED', 'AUTO ACCIDENT']
INJURY_KINDS = ['gradual', 'sudden', 'accident', 'sport', 'lift', 'twist', 'fall', 'bend', 'pull', 'reach']
PAIN_PATTERNS = ['Constant', 'Comes and goes (intermittent)']


class Answer:
    def __init__(self, kind, field=None, choices=None, low=1, high=10):
        self.kind = kind
        self.field = field
        self.choices = choices
        self.low = low
        self.high = high

    def parse(self, key, form, current):
        field = self.field or key
        if self.kind == BOOLEAN:
            return is_checked(form.get(field))

        if field not in form:
            return current

        value = form.get(field)
        if self.kind == TEXT:
            value = value.strip() if isinstance(value, str) else value
            return value or None
        if self.kind == DATE:
            parsed = parse_date(value)
            return parsed.isoformat() if parsed else None
        if self.kind == CHOICE:
            return value if value in self.choices else None
        if self.kind == RATING:
            try:
                rating = int(value)
            except (TypeError, ValueError):
                return None
            return rating if self.low <= rating <= self.high else None
        raise ValueError(f'Unknown answer kind: {self.kind}')


def _group(kind, *names):
    return {name: Answer(kind) for name in names}


INTAKE_SCHEMA = {
    'dominant_hand': Answer(BOOLEAN),
    'x_rays': Answer(BOOLEAN),
    'primary_physician_name': Answer(TEXT),
    'clinic_name': Answer(TEXT),
    'latex_allergy': Answer(BOOLEAN),
    'body_part': _group(
        BOOLEAN,
        'right_shoulder', 'left_shoulder', 'right_elbow', 'left_elbow',
        'right_wrist', 'left_wrist', 'right_hand', 'left_hand',
        'right_knee', 'left_knee', 'right_ankle', 'left_ankle',
        'right_foot', 'left_foot', 'neck', 'back',
    ),
    'pain_onset': _group(TEXT, 'days', 'weeks', 'months', 'years'),
    'problem_like_this_before': Answer(BOOLEAN),
    'injuries': {
        'main_group': Answer(CHOICE, field='injury_group', choices=INJURY_GROUPS),
        'input_type': Answer(CHOICE, field='injury_kind', choices=INJURY_KINDS),
        'sport': Answer(TEXT, field='injury_sport'),
        'school': Answer(TEXT, field='injury_school'),
        'date1': Answer(DATE, field='injury_date1'),
        'date2': Answer(DATE, field='injury_date2'),
        'date3': Answer(DATE, field='injury_date3'),
        'date4': Answer(DATE, field='injury_date4'),
        'comment': Answer(TEXT, field='injury_comment'),
    },
    'pain_rating': Answer(RATING),
    'quality': _group(BOOLEAN, 'sharp', 'dull', 'stabbing', 'throbbing', 'aching', 'burning'),
    'the_pain_is': Answer(CHOICE, choices=PAIN_PATTERNS),
    'wake_you': Answer(BOOLEAN),
    'symptoms': {
        **_group(
            BOOLEAN,
            'swelling', 'bruises', 'numbness', 'tingling', 'weakness', 'giving_way',
            'locking_catching', 'heartburn', 'nausea', 'blood_in_stool', 'liver_disease',
            'thyroid_disease', 'heat_or_cold_intolerance', 'weight_loss', 'loss_of_appetite',
            'kidney_problems', 'easy_bruising', 'trouble_swallowing', 'blurred_vision',
            'double_vision', 'vision_loss', 'hearing_loss', 'hoarseness', 'chest_pain',
            'palpitations', 'chronic_cough', 'shortness_of_breath', 'painful_urination',
            'blood_in_urine', 'frequent_rashes', 'lumps', 'skin_ulcers', 'psoriasis',
            'headaches', 'dizziness', 'seizures', 'depression', 'drug_alcohol_addiction',
            'sleep_disorder', 'easy_bleeding', 'anemia', 'smoking_risk',
            'getting_better', 'getting_worse', 'unchanged',
            'standing', 'walking', 'lifting', 'exercise', 'twisting', 'lying_in_bed',
            'bending', 'squatting', 'kneeling', 'stairs', 'sitting', 'coughing', 'sneezing',
            'rest', 'elevation', 'heat', 'ice',
            'mri', 'cat_scan', 'bone_scan', 'nerve_test',
            'insulin', 'oral_meds', 'diet',
            'heart_attack', 'high_blood_pressure', 'blood_clots', 'stroke', 'heart_failure',
            'ankle_swelling', 'kidney_failure', 'cancer', 'stomachache', 'i_do_not_have_any',
            'direct_relatives_diabetes', 'direct_relatives_high_blood_pressure',
            'direct_relatives_rheumatoid_arthritis', 'student',
        ),
        # year each symptom group started
        **{f'year{n}': Answer(TEXT) for n in range(1, 13)},
        'describe': Answer(TEXT, field='symptoms_describe'),
    },
    'other': Answer(TEXT),
    'treatment': _group(BOOLEAN, 'injection', 'brace', 'physical_therapy', 'cane_crutch'),
    'medications': Answer(TEXT),
    'allergic_to_medic': Answer(BOOLEAN),
    'reaction': Answer(TEXT),
    'seen_in_the_er': Answer(BOOLEAN),
    'which_er': Answer(TEXT),
    'er_visit': Answer(BOOLEAN),
    'who_saw_you_in_er': Answer(TEXT),
    'other_scan': Answer(TEXT),
    'had_surgery': Answer(BOOLEAN),
    'procedure1': Answer(TEXT),
    'surgeon1': Answer(TEXT),
    'city1': Answer(TEXT),
    'date1': Answer(DATE),
    'procedure2': Answer(TEXT),
    'surgeon2': Answer(TEXT),
    'city2': Answer(TEXT),
    'date2': Answer(DATE),
    'work_status': _group(BOOLEAN, 'regular', 'light_duty', 'not_working', 'disabled', 'retired', 'is_student'),
    'last_work_date': Answer(DATE),
    'prior_problem': {
        'has_prior_problem': Answer(BOOLEAN),
        'description': Answer(TEXT, field='prior_problem_description'),
    },
    'other_joints': {
        **_group(BOOLEAN, 'morning_stiffness', 'joint_pain', 'back_pain', 'gout',
                 'rheumatoid_arthritis', 'prior_fracture'),
        'prior_fracture_bone': Answer(TEXT),
    },
    'hiv_positive': Answer(BOOLEAN),
    'diabetic': Answer(BOOLEAN),
    'diet_none': Answer(BOOLEAN),
    'blood_thinners': Answer(BOOLEAN),
    'which_one': Answer(TEXT),
    'past_surgical_history': Answer(TEXT),
    'anesthesia': Answer(BOOLEAN),
    'anesthesia_explain': Answer(TEXT),
    'hospitalizations': Answer(TEXT),
    'heart_attack_year': Answer(TEXT),
    'blood_clots_year': Answer(TEXT),
    'cancer_location': Answer(TEXT),
    'anti_inflammatories': Answer(TEXT),
    'direct_relatives': Answer(TEXT),
    'same_condition': Answer(BOOLEAN),
    'tobacco': Answer(BOOLEAN),
    'packs_per_day': Answer(TEXT),
    'alcohol_use': Answer(BOOLEAN),
    'daily': Answer(BOOLEAN),
    'alcohol_per_week': Answer(TEXT),
    'people_live_with': Answer(TEXT),
    'marital_history': Answer(TEXT),
    'occupation': Answer(TEXT),
    'employer': Answer(TEXT),
    'working_plan': Answer(BOOLEAN),
}


def _parse_group(schema, form, current):
    answers = {}
    for key, spec in schema.items():
        if isinstance(spec, dict):
            answers[key] = _parse_group(spec, form, current.get(key) or {})
        else:
            answers[key] = spec.parse(key, form, current.get(key))
    return answers


def parse_intake(form, current=None):
    """Builds the questionnaire document from submitted form data.

    Boolean answers follow checkbox semantics; other answers missing from
    ``form`` keep their value from ``current``.
    """
    return _parse_group(INTAKE_SCHEMA, form, current or {})


def empty_intake():
    return parse_intake({})


def intake_form_fields(intake, schema=None, group=None):
    """Flattens the questionnaire into the inputs of the patient profile form.

    Yields ``(group, field, answer, value)`` where ``field`` is the form field
    name and ``group`` the top-level group the answer belongs to, if any.
    """
    schema = INTAKE_SCHEMA if schema is None else schema
    intake = intake or {}
    for key, spec in schema.items():
        if isinstance(spec, dict):
            yield from intake_form_fields(intake.get(key), spec, group or key)
        else:
            yield group, spec.field or key, spec, intake.get(key)
