from typing import Any, Dict

DEFAULT_SERIES = 3


def normalize_workout_body(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Converte o formato antigo `exerciseIds` para `plan`.

    Sempre devolve uma cópia rasa; o dict recebido não é alterado. Se `plan`
    já veio preenchido ele prevalece e `exerciseIds` fica na cópia como está.
    """
    body = dict(raw)
    exercise_ids = body.get("exerciseIds")
    if isinstance(exercise_ids, list) and body.get("plan") is None:
        body["plan"] = [
            {"exerciseId": exercise_id, "series": DEFAULT_SERIES}
            for exercise_id in exercise_ids
        ]
        del body["exerciseIds"]
    return body
