# entries/signals.py
from django.dispatch import Signal

# Envoyé après le commit de la transaction qui a créé la soumission.
# Arguments: entry=<Entry>, form=<Form>
# Les receivers sont appelés de façon synchrone, dans l'ordre de connexion.
entry_created = Signal()
