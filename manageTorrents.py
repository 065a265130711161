#!/usr/bin/env python3
"""
Gerenciamento de torrents no daemon Transmission.

Uso:
    python manageTorrents.py --listar
    python manageTorrents.py --iniciar 1,2 --url http://nas:9091/transmission/rpc
    python manageTorrents.py --help
"""

import argparse
import sys
from pathlib import Path

from transmission_lib import TransmissionClient, TransmissionError, AuthError, ConfigError
from transmission_lib.utils import parse_ids, format_bytes

TODOS = "todos"


def _ids(valor: str):
    """Tipo argparse: 'todos' ou lista de ids separada por virgula."""
    if valor == TODOS:
        return TODOS
    try:
        ids = parse_ids(valor)
    except ValueError:
        raise argparse.ArgumentTypeError(f"lista de ids invalida: '{valor}' (ex: 1,2 ou 'todos')")
    if not ids:
        raise argparse.ArgumentTypeError("informe ao menos um id")
    return ids


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Gerenciamento de torrents no daemon Transmission",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemplos:
  python manageTorrents.py --listar
  python manageTorrents.py --iniciar todos
  python manageTorrents.py --parar 3,4
  python manageTorrents.py --adicionar ubuntu.torrent
  python manageTorrents.py --adicionar "magnet:?xt=urn:btih:..."
  python manageTorrents.py --remover 5 --apagar-dados
  python manageTorrents.py --stats
        """
    )

    parser.add_argument("--url", type=str, help="Endpoint RPC (default: TRANSMISSION_URL ou localhost)")
    parser.add_argument("--timeout", type=float, help="Timeout em segundos")

    parser.add_argument("--listar", action="store_true", help="Listar torrents")
    parser.add_argument("--iniciar", type=_ids, metavar="IDS", help="Iniciar torrents (ex: 1,2 ou 'todos')")
    parser.add_argument("--parar", type=_ids, metavar="IDS", help="Parar torrents (ex: 1,2 ou 'todos')")
    parser.add_argument("--adicionar", type=str, metavar="ARQUIVO_OU_URL", help="Adicionar .torrent, URL ou magnet")
    parser.add_argument("--destino", type=str, help="Diretorio de download para --adicionar")
    parser.add_argument("--pausado", action="store_true", help="Adicionar sem iniciar")
    parser.add_argument("--remover", type=_ids, metavar="IDS", help="Remover torrents (ex: 1,2 ou 'todos')")
    parser.add_argument("--apagar-dados", action="store_true", help="Com --remover, apaga os arquivos baixados")
    parser.add_argument("--stats", action="store_true", help="Estatisticas do daemon")

    parser.add_argument("--debug", action="store_true", help="Modo debug")

    args = parser.parse_args(argv)

    try:
        tc = TransmissionClient.from_env(url=args.url, timeout=args.timeout, debug=args.debug)
    except ConfigError as e:
        print(f"[ERRO] {e}")
        return 1

    try:
        if args.listar:
            print("\n=== TORRENTS ===")
            for t in tc.get_all():
                print(f"  [{t.id}] {t.name} - {t.status_name} ({t.percent_done * 100:.1f}%)")
            return 0

        if args.stats:
            stats = tc.session_stats().stats
            print("\n=== ESTATISTICAS ===")
            print(f"  Torrents: {stats.torrent_count} ({stats.active_torrent_count} ativos, "
                  f"{stats.paused_torrent_count} pausados)")
            print(f"  Download: {format_bytes(stats.download_speed)}/s")
            print(f"  Upload: {format_bytes(stats.upload_speed)}/s")
            print(f"  Total baixado: {format_bytes(stats.cumulative.downloaded_bytes)}")
            print(f"  Total enviado: {format_bytes(stats.cumulative.uploaded_bytes)}")
            return 0

        if args.iniciar:
            ok = tc.start_all() if args.iniciar == TODOS else tc.start(args.iniciar)
        elif args.parar:
            ok = tc.stop_all() if args.parar == TODOS else tc.stop(args.parar)
        elif args.remover:
            ids = args.remover
            if ids == TODOS:
                ok = tc.remove_all(args.apagar_dados)
            else:
                ok = tc.remove(ids, args.apagar_dados)
        elif args.adicionar:
            if Path(args.adicionar).is_file():
                ok = tc.add_file(args.adicionar, args.destino, args.pausado)
            else:
                ok = tc.add_url(args.adicionar, args.destino, args.pausado)
        else:
            parser.print_help()
            return 0

        if not ok:
            print("[ERRO] Daemon recusou a operacao")
            return 1
        tc.logger.success("Operacao concluida")
        print("[OK] Concluido")
        return 0

    except AuthError:
        print("Falha na autenticacao! Verifique as credenciais no arquivo .env")
        print("O arquivo .env deve conter:")
        print("  TRANSMISSION_USER=usuario")
        print("  TRANSMISSION_PASSWORD=senha")
        return 1
    except TransmissionError as e:
        print(f"[ERRO] {e}")
        return 1
    finally:
        tc.close()


if __name__ == "__main__":
    sys.exit(main())
