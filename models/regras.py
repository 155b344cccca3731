"""
Registros de configuração das regras de rescisão.

Motivos, categorias e faixas de tributação são carregados uma única vez
(veja core/tabelas.py) e nunca alterados, por isso todos os modelos são
congelados.
"""

import math
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Motivo(BaseModel):
    """Entrada do catálogo de motivos de rescisão."""

    model_config = ConfigDict(frozen=True)

    codigo: str = Field(description="Código do motivo (ex: '02')")
    descricao: str = Field(description="Descrição do motivo")
    categoria: str = Field(description="Chave da categoria de regras aplicável")


class CategoriaRegras(BaseModel):
    """
    Conjunto de regras que define quais verbas são devidas em uma categoria.

    Toda categoria declara todas as regras; os padrões correspondem a
    "verba não devida" e fatores neutros.
    """

    model_config = ConfigDict(frozen=True)

    descricao: str
    saldo_salario: bool = False
    ferias_vencidas: bool = False
    ferias_proporcionais: bool = False
    decimo_terceiro: bool = False
    aviso: bool = Field(default=False, description="Paga aviso prévio indenizado")
    reflexos_aviso: bool = Field(
        default=False,
        description="Projeta o aviso sobre 13º e férias (+1/12 cada)"
    )
    multa_fgts: float = Field(default=0.0, description="Percentual da multa do FGTS (0, 0.2 ou 0.4)")
    fator_aviso: float = Field(default=1.0, description="Fator aplicado ao aviso indenizado")
    fator_reducao: float = Field(
        default=1.0,
        description="Fator aplicado às verbas proporcionais calculadas (culpa recíproca)"
    )
    desconto_aviso: bool = Field(default=False, description="Desconta o aviso não cumprido")
    requer_data_termino: bool = Field(
        default=False,
        description="Indenização do Art. 479; exige a data de término do contrato"
    )


class FaixaInss(BaseModel):
    model_config = ConfigDict(frozen=True)

    ate: float
    aliquota: float


class TabelaInss(BaseModel):
    """Tabela progressiva do INSS (alíquotas marginais por faixa)."""

    model_config = ConfigDict(frozen=True)

    teto: float
    faixas: Tuple[FaixaInss, ...]


class FaixaIrrf(BaseModel):
    """Faixa do IRRF: alíquota única sobre a base, menos a parcela a deduzir."""

    model_config = ConfigDict(frozen=True)

    de: float = 0.0
    ate: float = math.inf
    aliquota: float
    deduzir: float = 0.0
