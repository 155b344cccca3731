# tests/test_tabelas.py

import pytest

from core.excecoes import CategoriaDesconhecidaError, MotivoDesconhecidoError
from core.tabelas import CATEGORIAS, MOTIVOS, listar_motivos, resolver_motivo
from models.regras import Motivo


def test_todo_motivo_resolve_para_uma_categoria():
    for motivo in listar_motivos():
        resolvido, categoria = resolver_motivo(motivo.codigo)
        assert resolvido == motivo
        assert categoria is CATEGORIAS[motivo.categoria]


def test_codigos_de_motivo_unicos():
    codigos = [motivo.codigo for motivo in listar_motivos()]
    assert len(codigos) == len(set(codigos)) == len(MOTIVOS)


def test_motivo_desconhecido():
    with pytest.raises(MotivoDesconhecidoError) as erro:
        resolver_motivo("99")
    assert erro.value.codigo == "99"


def test_categoria_desconhecida_e_erro_de_configuracao():
    motivos = {"77": Motivo(codigo="77", descricao="Motivo de teste", categoria="INEXISTENTE")}
    with pytest.raises(CategoriaDesconhecidaError) as erro:
        resolver_motivo("77", motivos=motivos)
    assert erro.value.categoria == "INEXISTENTE"


@pytest.mark.parametrize("codigo, multa", [
    ("01", 0.0),
    ("02", 0.40),
    ("03", 0.40),
    ("04", 0.0),
    ("28", 0.20),
    ("29", 0.40),
    ("44", 0.20),
])
def test_percentual_multa_fgts_por_motivo(codigo, multa):
    _, categoria = resolver_motivo(codigo)
    assert categoria.multa_fgts == multa


def test_regras_especiais_das_categorias():
    assert CATEGORIAS["ACORDO_484A"].fator_aviso == 0.5
    assert CATEGORIAS["REDUCAO_50"].fator_reducao == 0.5
    assert CATEGORIAS["PEDIDO_DEMISSAO"].desconto_aviso
    assert not CATEGORIAS["PEDIDO_DEMISSAO"].aviso
    assert CATEGORIAS["A_TERMO_ANTECIPADO_EMPREGADOR"].requer_data_termino
    justa_causa = CATEGORIAS["JUSTA_CAUSA"]
    assert justa_causa.saldo_salario and justa_causa.ferias_vencidas
    assert not (justa_causa.ferias_proporcionais or justa_causa.decimo_terceiro or justa_causa.aviso)
