from marshmallow import Schema, fields, validate

class RegisterSchema(Schema):
    name = fields.Str(allow_none=True, load_default=None)
    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=6))

class LoginSchema(Schema):
    email = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))
