from datetime import timezone
from marshmallow import Schema, fields, validate
from app.utils.enums import MealType

class MealDateField(fields.DateTime):
    """Accepts a date or datetime; stored as naive UTC."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str) and len(value.strip()) == 10:
            value = f"{value.strip()}T00:00:00"
        parsed = super()._deserialize(value, attr, data, **kwargs)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed

class IngredientRequirementSchema(Schema):
    itemName = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    gramsPerPax = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))

class CreateMealSchema(Schema):
    title = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    type = fields.Str(load_default=MealType.BREAKFAST.value, validate=validate.OneOf([e.value for e in MealType]))
    date = MealDateField(required=True)
    imgURL = fields.Str(allow_none=True, load_default=None)
    ingredients = fields.List(
        fields.Nested(IngredientRequirementSchema),
        required=True,
        validate=validate.Length(min=1, error="At least one ingredient is required"),
    )

class BookMealSchema(Schema):
    mealId = fields.Int(required=True)
