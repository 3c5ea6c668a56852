from dataclasses import dataclass


@dataclass(frozen=True)
class ServerContext:
    """
    리스너 바인드 주소. 서버 시작 전에 한 번 생성되어
    각 라우터 팩토리에 명시적으로 전달됨 (읽기 전용).
    """
    server_addr: str

    @classmethod
    def from_bind(cls, host: str, port: int) -> "ServerContext":
        if ":" in host:
            # IPv6 literal
            return cls(server_addr=f"[{host}]:{port}")
        return cls(server_addr=f"{host}:{port}")
