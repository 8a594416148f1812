# aggregator/models.py
from django.db import models

from entries.models import Form


# ---------- Réglages du site (singleton) ----------
class SiteConfiguration(models.Model):
    remote_base_url = models.URLField(
        blank=True, default="",
        help_text="URL de l'API du site central (ex: https://central.example.org/aggregator/api). "
                  "Laisser vide si ce site ne fait que recevoir des soumissions."
    )
    public_key = models.CharField(max_length=255, blank=True, default="")
    private_key = models.CharField(max_length=255, blank=True, default="")
    local_identifier = models.CharField(
        max_length=150, blank=True, default="",
        help_text="Le site central filtre les résultats avec cette valeur. "
                  "Le nom du site est utilisé si vide."
    )
    results_enabled = models.BooleanField(default=False, help_text="Activer la page des résultats (site central)")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Configuration de l'agrégateur"
        verbose_name_plural = "Configuration de l'agrégateur"

    def __str__(self):
        return self.remote_base_url or "Site récepteur"

    def clean(self):
        self.remote_base_url = (self.remote_base_url or "").strip().rstrip("/")
        self.public_key = (self.public_key or "").strip()
        self.private_key = (self.private_key or "").strip()
        self.local_identifier = (self.local_identifier or "").strip()

    def save(self, *args, **kwargs):
        # une seule ligne de configuration par installation
        self.pk = 1
        self.clean()
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        obj = cls.objects.filter(pk=1).first()
        if obj is not None:
            obj.clean()
        return obj

    @property
    def is_configured(self) -> bool:
        return bool(self.remote_base_url and self.public_key and self.private_key)

    def effective_identifier(self, display_name: str) -> str:
        return self.local_identifier or display_name


# ---------- Correspondance formulaire local -> formulaire distant ----------
class FormMapping(models.Model):
    form = models.OneToOneField(Form, on_delete=models.CASCADE, related_name="aggregator_mapping")
    enabled = models.BooleanField(default=False, help_text="Envoyer les soumissions de ce formulaire au site central")
    remote_form_id = models.CharField(
        max_length=64, blank=True, default="",
        help_text="ID du formulaire sur le site central. Si vide, le formulaire est créé "
                  "à la première soumission et son ID enregistré ici."
    )
    delete_after_forward = models.BooleanField(default=False, help_text="Supprimer la soumission locale après l'envoi")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Formulaire agrégé"
        verbose_name_plural = "Formulaires agrégés"

    def __str__(self):
        return f"{self.form_id} -> {self.remote_form_id or '?'}"


# ---------- Journal des envois ----------
class ForwardLog(models.Model):
    FORWARDED, FAILED = "FORWARDED", "FAILED"
    STATUS_CHOICES = [(FORWARDED, FORWARDED), (FAILED, FAILED)]

    form = models.ForeignKey(Form, on_delete=models.SET_NULL, null=True, blank=True)
    entry_id = models.CharField(max_length=64, db_index=True)  # la soumission peut avoir été supprimée
    remote_form_id = models.CharField(max_length=64, blank=True, default="")
    status = models.CharField(max_length=16, choices=STATUS_CHOICES)
    deleted = models.BooleanField(default=False)
    message = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-id",)

    def __str__(self):
        return f"[{self.status}] {self.entry_id}"
