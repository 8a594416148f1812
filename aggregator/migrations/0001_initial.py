from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("entries", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="SiteConfiguration",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("remote_base_url", models.URLField(blank=True, default="", help_text="URL de l'API du site central (ex: https://central.example.org/aggregator/api). Laisser vide si ce site ne fait que recevoir des soumissions.")),
                ("public_key", models.CharField(blank=True, default="", max_length=255)),
                ("private_key", models.CharField(blank=True, default="", max_length=255)),
                ("local_identifier", models.CharField(blank=True, default="", help_text="Le site central filtre les résultats avec cette valeur. Le nom du site est utilisé si vide.", max_length=150)),
                ("results_enabled", models.BooleanField(default=False, help_text="Activer la page des résultats (site central)")),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Configuration de l'agrégateur",
                "verbose_name_plural": "Configuration de l'agrégateur",
            },
        ),
        migrations.CreateModel(
            name="FormMapping",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("enabled", models.BooleanField(default=False, help_text="Envoyer les soumissions de ce formulaire au site central")),
                ("remote_form_id", models.CharField(blank=True, default="", help_text="ID du formulaire sur le site central. Si vide, le formulaire est créé à la première soumission et son ID enregistré ici.", max_length=64)),
                ("delete_after_forward", models.BooleanField(default=False, help_text="Supprimer la soumission locale après l'envoi")),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "form",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="aggregator_mapping",
                        to="entries.form",
                    ),
                ),
            ],
            options={
                "verbose_name": "Formulaire agrégé",
                "verbose_name_plural": "Formulaires agrégés",
            },
        ),
        migrations.CreateModel(
            name="ForwardLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entry_id", models.CharField(db_index=True, max_length=64)),
                ("remote_form_id", models.CharField(blank=True, default="", max_length=64)),
                ("status", models.CharField(choices=[("FORWARDED", "FORWARDED"), ("FAILED", "FAILED")], max_length=16)),
                ("deleted", models.BooleanField(default=False)),
                ("message", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "form",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        to="entries.form",
                    ),
                ),
            ],
            options={
                "ordering": ("-id",),
            },
        ),
    ]
