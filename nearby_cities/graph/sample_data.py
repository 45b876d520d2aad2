"""Demonstration dataset: cities of Jalisco, Mexico, and road distances."""

from typing import Any, Dict, List

SAMPLE_DATA: Dict[str, List[Any]] = {
    "cities": [
        "Guadalajara",
        "Tlaquepaque",
        "Zapopan",
        "Tepatitlán",
        "Lagos de Moreno",
        "Tala",
        "Tequila",
    ],
    "edges": [
        {"from": "Guadalajara", "to": "Zapopan", "distance": 12},
        {"from": "Guadalajara", "to": "Tlaquepaque", "distance": 10},
        {"from": "Guadalajara", "to": "Tepatitlán", "distance": 78},
        {"from": "Guadalajara", "to": "Tequila", "distance": 60},
        {"from": "Zapopan", "to": "Tala", "distance": 35},
        {"from": "Tepatitlán", "to": "Lagos de Moreno", "distance": 85},
    ],
}
