"""Configurações e constantes do cliente HTTP."""

from pathlib import Path

import httpx


class ClientConfig:
    """Configurações do cliente."""

    # Timeouts (em segundos)
    CONNECT_TIMEOUT = 5.0
    READ_TIMEOUT = 30.0
    WRITE_TIMEOUT = 10.0
    POOL_TIMEOUT = 5.0

    # Headers
    DEFAULT_USER_AGENT: str | None = None
    JSON_CONTENT_TYPE = "application/json"

    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    def __init__(
        self,
        connect_timeout: float | None = None,
        read_timeout: float | None = None,
        write_timeout: float | None = None,
        pool_timeout: float | None = None,
        user_agent: str | None = None,
        log_level: str | None = None,
        log_file: str | Path | None = None,
    ):
        """
        Args:
            connect_timeout: Tempo para estabelecer conexão
            read_timeout: Tempo para ler a resposta
            write_timeout: Tempo para enviar dados
            pool_timeout: Tempo para obter conexão do pool
            user_agent: User-Agent padrão aplicado às requisições
            log_level: Configura o logging do pacote ao criar o cliente
                (None mantém a configuração do chamador)
            log_file: Arquivo de log adicional (requer log_level)
        """
        self.connect_timeout = self._default(connect_timeout, self.CONNECT_TIMEOUT)
        self.read_timeout = self._default(read_timeout, self.READ_TIMEOUT)
        self.write_timeout = self._default(write_timeout, self.WRITE_TIMEOUT)
        self.pool_timeout = self._default(pool_timeout, self.POOL_TIMEOUT)
        self.user_agent = self._default(user_agent, self.DEFAULT_USER_AGENT)
        self.log_level = log_level.upper() if log_level is not None else None
        self.log_file = log_file

        self._validate_config()

    @staticmethod
    def _default(value, default):
        return default if value is None else value

    def _validate_config(self) -> None:
        """Valida as configurações."""
        timeouts = {
            "connect_timeout": self.connect_timeout,
            "read_timeout": self.read_timeout,
            "write_timeout": self.write_timeout,
            "pool_timeout": self.pool_timeout,
        }
        for name, value in timeouts.items():
            if value <= 0:
                raise ValueError(f"{name} deve ser positivo: {value}")
        if self.user_agent is not None and not self.user_agent.strip():
            raise ValueError("User-Agent não pode ser vazio")
        if self.log_level is not None and self.log_level not in self.LOG_LEVELS:
            raise ValueError(f"Nível de log inválido: {self.log_level}")
        if self.log_file is not None and self.log_level is None:
            raise ValueError("log_file requer log_level")

    @property
    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_timeout,
            read=self.read_timeout,
            write=self.write_timeout,
            pool=self.pool_timeout,
        )

    def __repr__(self) -> str:
        return (
            f"<ClientConfig connect={self.connect_timeout} read={self.read_timeout} "
            f"user_agent={self.user_agent!r} log_level={self.log_level}>"
        )
