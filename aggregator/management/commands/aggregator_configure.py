# aggregator/management/commands/aggregator_configure.py
from datetime import timedelta

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from aggregator.models import FormMapping, ForwardLog, SiteConfiguration
from entries.models import Form
from entries.services import site_display_name


class Command(BaseCommand):
    help = "Configure l'agrégateur (site central, identifiant local, formulaires agrégés)."

    def add_arguments(self, parser):
        site = parser.add_argument_group("site")
        site.add_argument("--url", type=str, help="URL de l'API du site central")
        site.add_argument("--public-key", type=str)
        site.add_argument("--private-key", type=str)
        site.add_argument("--identifier", type=str, help="Identifiant de ce site (vide = nom du site)")
        res = site.add_mutually_exclusive_group()
        res.add_argument("--results", dest="results", action="store_true", default=None)
        res.add_argument("--no-results", dest="results", action="store_false", default=None)

        form = parser.add_argument_group("formulaire")
        form.add_argument("--form", type=int, help="ID du formulaire local")
        en = form.add_mutually_exclusive_group()
        en.add_argument("--enable", dest="enabled", action="store_true", default=None)
        en.add_argument("--disable", dest="enabled", action="store_false", default=None)
        form.add_argument("--remote-form-id", type=str)
        dl = form.add_mutually_exclusive_group()
        dl.add_argument("--delete-after-forward", dest="delete", action="store_true", default=None)
        dl.add_argument("--keep-entries", dest="delete", action="store_false", default=None)

        journal = parser.add_argument_group("journal")
        journal.add_argument("--purge-log-days", type=int, default=None,
                             help="Supprimer les lignes du journal des envois plus anciennes que N jours")

    def handle(self, *args, **opts):
        config = SiteConfiguration.load() or SiteConfiguration()
        site_fields = {
            "remote_base_url": opts.get("url"),
            "public_key": opts.get("public_key"),
            "private_key": opts.get("private_key"),
            "local_identifier": opts.get("identifier"),
            "results_enabled": opts.get("results"),
        }
        changed = False
        for name, value in site_fields.items():
            if value is not None:
                setattr(config, name, value)
                changed = True
        if changed or config.pk is None:
            config.save()

        mapping = None
        if opts.get("form") is not None:
            try:
                form = Form.objects.get(pk=opts["form"])
            except Form.DoesNotExist:
                raise CommandError(f"Formulaire {opts['form']} introuvable.")
            mapping, _ = FormMapping.objects.get_or_create(form=form)
            if opts.get("enabled") is not None:
                mapping.enabled = opts["enabled"]
            if opts.get("remote_form_id") is not None:
                mapping.remote_form_id = opts["remote_form_id"].strip()
            if opts.get("delete") is not None:
                mapping.delete_after_forward = opts["delete"]
            mapping.save()
        elif any(opts.get(k) is not None for k in ("enabled", "remote_form_id", "delete")):
            raise CommandError("--form est requis pour configurer un formulaire.")

        if opts.get("purge_log_days") is not None:
            days = opts["purge_log_days"]
            if days < 0:
                raise CommandError("--purge-log-days doit être positif.")
            cutoff = timezone.now() - timedelta(days=days)
            purged, _ = ForwardLog.objects.filter(created_at__lt=cutoff).delete()
            self.stdout.write(f"Journal: {purged} ligne(s) supprimée(s) (avant {cutoff:%Y-%m-%d %H:%M})")

        mode = "émetteur" if config.is_configured else "récepteur"
        self.stdout.write(
            f"Site: {config.effective_identifier(site_display_name())} | mode={mode} "
            f"| url={config.remote_base_url or '-'} | results={'on' if config.results_enabled else 'off'}"
        )
        if mapping is not None:
            self.stdout.write(
                f"Form {mapping.form_id}: enabled={mapping.enabled} "
                f"remote_form_id={mapping.remote_form_id or '-'} "
                f"delete_after_forward={mapping.delete_after_forward}"
            )
        self.stdout.write(self.style.SUCCESS("Configuration de l'agrégateur enregistrée"))
