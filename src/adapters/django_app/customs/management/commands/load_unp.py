"""
Carrega UNPs na tabela de referência.

Uso:
    python manage.py load_unp 123456789 987654321
    python manage.py load_unp --file unps.csv

O arquivo tem um UNP por linha, opcionalmente seguido de
";razão social". Linhas vazias e iniciadas por # são ignoradas.
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from src.core.users.validation import unp_tem_formato_valido

from ...models import UnpModel


class Command(BaseCommand):
    help = "Carrega UNPs válidos (9 dígitos) na tabela de referência"

    def add_arguments(self, parser):
        parser.add_argument('unps', nargs='*', help='UNPs a cadastrar')
        parser.add_argument('--file', dest='file', help='Arquivo com um UNP por linha')

    def handle(self, *args, **options):
        entries = [(unp, None) for unp in options['unps']]
        if options.get('file'):
            entries.extend(self._read_file(options['file']))

        if not entries:
            raise CommandError("Informe UNPs como argumentos ou via --file")

        invalid = [unp for unp, _ in entries if not unp_tem_formato_valido(unp)]
        if invalid:
            raise CommandError(f"UNPs inválidos: {', '.join(invalid)}")

        created = 0
        with transaction.atomic():
            for unp, company_name in entries:
                _, was_created = UnpModel.objects.get_or_create(
                    unp=unp,
                    defaults={'company_name': company_name},
                )
                created += int(was_created)

        self.stdout.write(self.style.SUCCESS(
            f"{created} UNP(s) cadastrado(s), {len(entries) - created} já existente(s)"
        ))

    def _read_file(self, path):
        try:
            with open(path, encoding='utf-8') as fh:
                lines = fh.read().splitlines()
        except OSError as e:
            raise CommandError(f"Não foi possível ler {path}: {e}")

        entries = []
        for line in lines:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            unp, _, company_name = line.partition(';')
            entries.append((unp.strip(), company_name.strip() or None))
        return entries
