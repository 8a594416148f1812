# aggregator/serializers.py
from rest_framework import serializers


class FormDefinitionSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default="")

    def to_internal_value(self, data):
        validated = super().to_internal_value(data)
        # "fields" est réservé par Serializer, on le valide à la main
        field_defs = data.get("fields") or []
        if not isinstance(field_defs, list) or not all(isinstance(f, dict) for f in field_defs):
            raise serializers.ValidationError({"fields": ["Expected a list of objects."]})
        validated["fields"] = field_defs
        return validated


class EntryRecordSerializer(serializers.Serializer):
    """Seul form_id est obligatoire ; les autres clés sont les valeurs des champs."""
    form_id = serializers.CharField()

    def to_internal_value(self, data):
        if not isinstance(data, dict):
            raise serializers.ValidationError("Each entry must be an object.")
        validated = super().to_internal_value(data)
        validated["payload"] = dict(data)
        return validated
