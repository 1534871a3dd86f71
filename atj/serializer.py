import json

from rest_framework import serializers


class ScriptParseSerializer(serializers.Serializer):
    input_js = serializers.CharField(allow_blank=True, trim_whitespace=False)
    jsx = serializers.BooleanField(default=False)
    range = serializers.BooleanField(default=False)
    loc = serializers.BooleanField(default=False)
    tolerant = serializers.BooleanField(default=False)
    tokens = serializers.BooleanField(default=False)
    comment = serializers.BooleanField(default=False)
    module = serializers.BooleanField(default=False)


class AstParseSerializer(serializers.Serializer):
    input_ast = serializers.JSONField()
    options = serializers.DictField(required=False, default=dict)
    minify = serializers.BooleanField(default=False)

    def validate_input_ast(self, value):
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                raise serializers.ValidationError('input_ast is not valid JSON')
        if not isinstance(value, dict):
            raise serializers.ValidationError('input_ast must be a JSON object')
        return value


class RegenerateSerializer(serializers.Serializer):
    input_js = serializers.CharField(allow_blank=True, trim_whitespace=False)
    comment = serializers.BooleanField(default=True)
    preserve_blank_lines = serializers.BooleanField(default=False)
    minify = serializers.BooleanField(default=False)
    module = serializers.BooleanField(default=False)
