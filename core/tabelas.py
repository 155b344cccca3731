"""
Tabelas oficiais usadas no cálculo de rescisão.

Reúne o catálogo de motivos de rescisão (códigos do TRCT), as categorias de
regras por tipo de desligamento e as tabelas progressivas de INSS e IRRF
vigentes em 2025. Os dados são carregados na importação e são somente
leitura.
"""

import math
from typing import Dict, List, Tuple

from config.settings import Config
from core.excecoes import CategoriaDesconhecidaError, MotivoDesconhecidoError
from models.regras import CategoriaRegras, FaixaInss, FaixaIrrf, Motivo, TabelaInss


Config.validate()

# Constantes de cálculo
VALOR_DEPENDENTE_IRRF = Config.VALOR_DEPENDENTE_IRRF
SALARIO_MINIMO = Config.SALARIO_MINIMO
DIAS_MES = Config.DIAS_MES_PADRAO


# Tabela INSS 2025 (progressiva, teto R$ 8.157,41)
TABELA_INSS = TabelaInss(
    teto=8157.41,
    faixas=(
        FaixaInss(ate=1518.00, aliquota=0.075),
        FaixaInss(ate=2793.88, aliquota=0.09),
        FaixaInss(ate=4190.83, aliquota=0.12),
        FaixaInss(ate=8157.41, aliquota=0.14),
    ),
)


# Tabela IRRF 2025 (alíquota efetiva com parcela a deduzir)
TABELA_IRRF: Tuple[FaixaIrrf, ...] = (
    FaixaIrrf(de=0.0, ate=2428.80, aliquota=0.0, deduzir=0.0),  # Isento
    FaixaIrrf(de=2428.81, ate=2826.65, aliquota=0.075, deduzir=182.16),
    FaixaIrrf(de=2826.66, ate=3751.05, aliquota=0.15, deduzir=394.16),
    FaixaIrrf(de=3751.06, ate=4664.68, aliquota=0.225, deduzir=675.49),
    FaixaIrrf(de=4664.69, ate=math.inf, aliquota=0.275, deduzir=908.73),
)


CATEGORIAS: Dict[str, CategoriaRegras] = {
    "JUSTA_CAUSA": CategoriaRegras(
        descricao="Justa causa",
        saldo_salario=True,
        ferias_vencidas=True,
    ),
    "SEM_JUSTA_CAUSA_EQUIVALENTE": CategoriaRegras(
        descricao="Sem justa causa",
        saldo_salario=True,
        ferias_vencidas=True,
        ferias_proporcionais=True,
        decimo_terceiro=True,
        aviso=True,
        reflexos_aviso=True,
        multa_fgts=0.40,
    ),
    "PEDIDO_DEMISSAO": CategoriaRegras(
        descricao="Pedido de demissão",
        saldo_salario=True,
        ferias_vencidas=True,
        ferias_proporcionais=True,
        decimo_terceiro=True,
        desconto_aviso=True,
    ),
    "ACORDO_484A": CategoriaRegras(
        descricao="Acordo 484-A",
        saldo_salario=True,
        ferias_vencidas=True,
        ferias_proporcionais=True,
        decimo_terceiro=True,
        aviso=True,
        reflexos_aviso=True,
        multa_fgts=0.20,
        fator_aviso=0.5,
    ),
    "MORTE": CategoriaRegras(
        descricao="Morte do empregado",
        saldo_salario=True,
        ferias_vencidas=True,
        ferias_proporcionais=True,
        decimo_terceiro=True,
    ),
    "TERMINO_A_TERMO": CategoriaRegras(
        descricao="Término de contrato a termo",
        saldo_salario=True,
        ferias_vencidas=True,
        ferias_proporcionais=True,
        decimo_terceiro=True,
    ),
    "A_TERMO_ANTECIPADO_EMPREGADOR": CategoriaRegras(
        descricao="Antecipado pelo empregador",
        saldo_salario=True,
        ferias_vencidas=True,
        ferias_proporcionais=True,
        decimo_terceiro=True,
        requer_data_termino=True,
    ),
    "A_TERMO_ANTECIPADO_EMPREGADO": CategoriaRegras(
        descricao="Antecipado pelo empregado",
        saldo_salario=True,
        ferias_vencidas=True,
        ferias_proporcionais=True,
        decimo_terceiro=True,
    ),
    "REDUCAO_50": CategoriaRegras(
        descricao="Com redução de 50%",
        saldo_salario=True,
        ferias_vencidas=True,
        ferias_proporcionais=True,
        decimo_terceiro=True,
        aviso=True,
        reflexos_aviso=True,
        multa_fgts=0.20,
        fator_reducao=0.5,
    ),
}


_MOTIVOS: Tuple[Motivo, ...] = (
    Motivo(codigo="01", descricao="Demitido COM justa causa", categoria="JUSTA_CAUSA"),
    Motivo(codigo="02", descricao="Demitido SEM justa causa", categoria="SEM_JUSTA_CAUSA_EQUIVALENTE"),
    Motivo(codigo="03", descricao="Rescisão indireta", categoria="SEM_JUSTA_CAUSA_EQUIVALENTE"),
    Motivo(codigo="04", descricao="Pedido de demissão", categoria="PEDIDO_DEMISSAO"),
    Motivo(codigo="08", descricao="Morte do empregado", categoria="MORTE"),
    Motivo(codigo="10", descricao="Experiência antecipado pelo empregador", categoria="A_TERMO_ANTECIPADO_EMPREGADOR"),
    Motivo(codigo="11", descricao="Experiência antecipado pelo empregado", categoria="A_TERMO_ANTECIPADO_EMPREGADO"),
    Motivo(codigo="12", descricao="Término do contrato de experiência", categoria="TERMINO_A_TERMO"),
    Motivo(codigo="22", descricao="Término do contrato por tempo determinado", categoria="TERMINO_A_TERMO"),
    Motivo(codigo="23", descricao="Antecipado pelo empregador (tempo determinado)", categoria="A_TERMO_ANTECIPADO_EMPREGADOR"),
    Motivo(codigo="24", descricao="Antecipado pelo empregado (tempo determinado)", categoria="A_TERMO_ANTECIPADO_EMPREGADO"),
    Motivo(codigo="28", descricao="Culpa recíproca", categoria="REDUCAO_50"),
    Motivo(codigo="29", descricao="Extinção da empresa", categoria="SEM_JUSTA_CAUSA_EQUIVALENTE"),
    Motivo(codigo="44", descricao="Rescisão por acordo entre as partes (484-A)", categoria="ACORDO_484A"),
)

MOTIVOS: Dict[str, Motivo] = {motivo.codigo: motivo for motivo in _MOTIVOS}


def listar_motivos() -> List[Motivo]:
    """Retorna o catálogo de motivos na ordem dos códigos do TRCT."""
    return list(_MOTIVOS)


def resolver_motivo(
    codigo: str,
    motivos: Dict[str, Motivo] = MOTIVOS,
    categorias: Dict[str, CategoriaRegras] = CATEGORIAS,
) -> Tuple[Motivo, CategoriaRegras]:
    """
    Localiza o motivo de rescisão e a categoria de regras correspondente.

    Args:
        codigo: Código do motivo (ex: "02" para dispensa sem justa causa).
        motivos: Catálogo de motivos (padrão: tabela oficial).
        categorias: Tabela de categorias (padrão: tabela oficial).

    Returns:
        Tupla (motivo, categoria).

    Raises:
        MotivoDesconhecidoError: Se o código não existir no catálogo.
        CategoriaDesconhecidaError: Se a categoria do motivo não existir.

    Exemplo:
        >>> motivo, categoria = resolver_motivo("44")
        >>> categoria.multa_fgts
        0.2
    """
    motivo = motivos.get(codigo)
    if motivo is None:
        raise MotivoDesconhecidoError(codigo)

    categoria = categorias.get(motivo.categoria)
    if categoria is None:
        raise CategoriaDesconhecidaError(motivo.categoria, codigo)

    return motivo, categoria
