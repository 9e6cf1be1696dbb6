"""
Meal log loader.

Parses meal records exported from the sync layer (JSON list of documents,
camelCase or snake_case keys) into immutable Meal snapshots.
"""

import json
import logging
from pathlib import Path
from typing import Union, List, Dict, Any, Iterable, Optional

from dietary_insights.errors import MealLogError
from dietary_insights.models import Meal, FoodItem, Nutrition, MealFlag, CONTAINER_TYPES
from dietary_insights.utils.timefmt import parse_timestamp

logger = logging.getLogger(__name__)


class MealLogLoader:
    """Loader for meal log exports.

    Capture clients disagree on key names, so each field is looked up
    across the known variants.
    """

    # Known key variations across clients
    TIMESTAMP_KEYS = ['loggedAt', 'logged_at', 'createdAt', 'timestamp']
    IMAGE_KEYS = ['imageUrl', 'image_url']
    NUTRITION_KEYS = ['nutrition', 'estimated_nutrition']

    def __init__(self, filepath: Union[str, Path], tz: Optional[str] = None):
        """Initialize loader with file path.

        Args:
            filepath: Path to a JSON file holding a list of meal documents
                (or an object with a ``meals`` list).
            tz: Zone name that timezone-aware timestamps are converted to.
        """
        self.filepath = Path(filepath)
        self.tz = tz
        self._meals: Optional[List[Meal]] = None

    def load(self) -> List[Meal]:
        """Load and parse the export.

        Returns:
            Meals in file order.
        """
        with open(self.filepath, 'r') as f:
            data = json.load(f)

        if isinstance(data, dict):
            data = data.get('meals', [])

        self._meals = self.from_records(data, tz=self.tz)
        logger.info("Loaded %d meals from %s", len(self._meals), self.filepath)
        return self._meals

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]], tz: Optional[str] = None) -> List[Meal]:
        """Parse an iterable of raw meal documents."""
        return [meal_from_record(record, tz=tz) for record in records]

    @property
    def meals(self) -> List[Meal]:
        """Get loaded meals (loads on first access)."""
        if self._meals is None:
            self._meals = self.load()
        return self._meals


def _find_key(record: Dict[str, Any], candidates: list) -> Optional[str]:
    for candidate in candidates:
        if record.get(candidate) is not None:
            return candidate
    return None


def meal_from_record(record: Dict[str, Any], tz: Optional[str] = None) -> Meal:
    """Build a Meal from one raw document.

    Raises:
        MealLogError: if the id or timestamp is missing or unparseable, or
            a food item or the nutrition block is malformed.
    """
    meal_id = record.get('id')
    if meal_id is None:
        raise MealLogError(f"Meal record has no id: {record!r}")

    ts_key = _find_key(record, MealLogLoader.TIMESTAMP_KEYS)
    if ts_key is None:
        raise MealLogError(f"Meal {meal_id} has no timestamp")
    try:
        logged_at = parse_timestamp(record[ts_key], tz=tz)
    except ValueError as exc:
        raise MealLogError(f"Meal {meal_id} has an invalid timestamp: {exc}") from exc

    foods = []
    for food in record.get('foods') or []:
        if not isinstance(food, dict):
            raise MealLogError(f"Meal {meal_id} has a malformed food item: {food!r}")
        container = food.get('container')
        if container is not None and container not in CONTAINER_TYPES:
            logger.debug("Meal %s has unknown container %r", meal_id, container)
            container = None
        foods.append(FoodItem(
            name=str(food.get('name', '')),
            portion=str(food.get('portion', '')),
            container=container,
        ))

    flags = tuple(str(flag) for flag in record.get('flags') or [])
    unknown = [flag for flag in flags if MealFlag.parse(flag) is None]
    if unknown:
        logger.debug("Meal %s carries unrecognized flags %s", meal_id, unknown)

    nutrition = None
    nutrition_key = _find_key(record, MealLogLoader.NUTRITION_KEYS)
    if nutrition_key is not None:
        raw = record[nutrition_key]
        if not isinstance(raw, dict):
            raise MealLogError(f"Meal {meal_id} has malformed nutrition: {raw!r}")
        try:
            nutrition = Nutrition(
                calories=float(raw.get('calories', 0)),
                protein=float(raw.get('protein', 0)),
                carbs=float(raw.get('carbs', 0)),
                fat=float(raw.get('fat', 0)),
                sodium=float(raw.get('sodium', 0)),
            )
        except (TypeError, ValueError) as exc:
            raise MealLogError(f"Meal {meal_id} has non-numeric nutrition: {exc}") from exc

    image_key = _find_key(record, MealLogLoader.IMAGE_KEYS)

    return Meal(
        id=str(meal_id),
        logged_at=logged_at,
        foods=tuple(foods),
        flags=flags,
        nutrition=nutrition,
        image_url=record[image_key] if image_key else None,
    )
