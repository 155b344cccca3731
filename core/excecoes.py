"""
Erros do motor de rescisão.

Todos são fatais: interrompem o cálculo e chegam ao chamador sem tratamento
local. Entradas irregulares que não impedem o cálculo (valores editados
negativos, dias úteis zerados etc.) não geram exceção.
"""


class RescisaoError(Exception):
    """Base para os erros estruturais de entrada do cálculo."""


class MotivoDesconhecidoError(RescisaoError):
    """Código de motivo de rescisão inexistente no catálogo."""

    def __init__(self, codigo: str):
        self.codigo = codigo
        super().__init__(f"Motivo de rescisão não encontrado: '{codigo}'.")


class CategoriaDesconhecidaError(RescisaoError):
    """Motivo aponta para uma categoria de regras inexistente (erro de configuração)."""

    def __init__(self, categoria: str, codigo_motivo: str):
        self.categoria = categoria
        self.codigo_motivo = codigo_motivo
        super().__init__(
            f"Categoria '{categoria}' do motivo '{codigo_motivo}' não existe na tabela de regras."
        )


class DataTerminoContratoAusenteError(RescisaoError):
    """Rescisão antecipada de contrato a termo sem a data de término prevista."""

    def __init__(self, codigo_motivo: str):
        self.codigo_motivo = codigo_motivo
        super().__init__(
            f"O motivo '{codigo_motivo}' exige a data de término do contrato "
            "para calcular a indenização do Art. 479 da CLT."
        )
