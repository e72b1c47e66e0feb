from marshmallow import Schema, fields, validate

class FeedbackSchema(Schema):
    rating = fields.Int(required=True, validate=validate.Range(min=1, max=5))
    comment = fields.Str(allow_none=True, load_default=None)
