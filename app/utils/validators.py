from typing import Optional, List, Iterable
import math


def parse_price(value) -> Optional[float]:
    """Convertit la saisie d'un prix; une chaîne vide donne None"""
    if value is None:
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().lstrip("$").strip()
        if not text:
            return None
        number = float(text)

    if math.isnan(number) or math.isinf(number):
        raise ValueError("Le prix doit être un nombre fini")
    if number < 0:
        raise ValueError("Le prix ne peut pas être négatif")

    return round(number, 2)


def clean_choices(values: Optional[Iterable[str]]) -> List[str]:
    """Supprime les blancs et les doublons en gardant l'ordre de sélection"""
    cleaned: List[str] = []
    for value in values or []:
        if value is None:
            continue
        value = str(value).strip()
        if value and value not in cleaned:
            cleaned.append(value)
    return cleaned


def validate_choice(value: Optional[str], allowed: List[str]) -> bool:
    return value in allowed
