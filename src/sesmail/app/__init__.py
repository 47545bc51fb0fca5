"""Core da aplicação: protocolos, infraestrutura e casos de uso."""
