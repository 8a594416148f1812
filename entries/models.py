# entries/models.py
from django.db import models


# ---------- Formulaire local ----------
class Form(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    # liste de définitions de champs: [{"id": "1", "label": "Nom", "type": "text"}, ...]
    fields = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Formulaire"
        verbose_name_plural = "Formulaires"
        ordering = ("id",)

    def __str__(self):
        return f"{self.title} (#{self.pk})"

    def to_definition(self) -> dict:
        """Définition du formulaire telle qu'envoyée au site distant."""
        return {
            "id": str(self.pk),
            "title": self.title,
            "description": self.description,
            "fields": list(self.fields or []),
        }


# ---------- Soumission ----------
class Entry(models.Model):
    form = models.ForeignKey(Form, on_delete=models.CASCADE, related_name="entries")
    values = models.JSONField(default=dict, blank=True)  # {clé du champ: valeur}
    meta = models.JSONField(default=dict, blank=True)    # métadonnées calculées (entry meta)
    source_url = models.CharField(max_length=500, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Soumission"
        verbose_name_plural = "Soumissions"
        ordering = ("-id",)

    def __str__(self):
        return f"Entry #{self.pk} ({self.form_id})"

    def to_record(self) -> dict:
        """
        Représentation "à plat" de la soumission :
        identifiants + valeurs des champs + métadonnées.
        """
        record = dict(self.values or {})
        record.update(self.meta or {})
        # les identifiants gagnent toujours sur une valeur de champ homonyme
        record.update({
            "id": str(self.pk),
            "form_id": str(self.form_id),
            "date_created": self.created_at.isoformat() if self.created_at else None,
            "source_url": self.source_url,
        })
        return record
