"""
Configuracoes e constantes compartilhadas do cliente Transmission.
"""

# Endpoint RPC
DEFAULT_URL = "http://localhost:9091/transmission/rpc"

# Header usado pelo daemon para o handshake de sessao
SESSION_HEADER = "X-Transmission-Session-Id"

# Daemon local/LAN: conexao e leitura falham rapido
DEFAULT_TIMEOUT = 2.0

# Variaveis de ambiente lidas por TransmissionClient.from_env
ENV_URL = "TRANSMISSION_URL"
ENV_USER = "TRANSMISSION_USER"
ENV_PASSWORD = "TRANSMISSION_PASSWORD"
ENV_TIMEOUT = "TRANSMISSION_TIMEOUT"

# Headers padrão para requisições HTTP
DEFAULT_HEADERS = {
    "User-Agent": "transmission-lib/1.0",
    "Accept": "application/json",
}

# Campos pedidos em torrent-get
TORRENT_FIELDS: list[str] = [
    "id",
    "name",
    "status",
    "hashString",
    "percentDone",
    "totalSize",
    "rateDownload",
    "rateUpload",
    "eta",
    "downloadDir",
    "error",
    "errorString",
]

# Codigos de status de torrent (rpc-spec)
TORRENT_STATUS: dict[int, str] = {
    0: "stopped",
    1: "check_wait",
    2: "check",
    3: "download_wait",
    4: "download",
    5: "seed_wait",
    6: "seed",
}
