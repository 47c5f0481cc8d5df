"""
Tests for the pandas ranking used by the dashboard and the export scripts.
"""

from app.services.ranking import get_ranking, load_partidas


def test_load_partidas_uses_api_column_names(db_session, make_partida):
    make_partida("A", "B", 10)

    df = load_partidas(db_session)

    assert list(df.columns) == ["id", "ganador", "perdedor", "puntosDelGanador"]
    assert df.iloc[0]["puntosDelGanador"] == 10


def test_ranking_empty(db_session):
    ranking = get_ranking(db_session)

    assert ranking.empty
    assert "Victorias" in ranking.columns


def test_ranking_counts_wins_and_losses(db_session, make_partida):
    make_partida("Ana", "Luis", 10)
    make_partida("Ana", "Marta", 20)
    make_partida("Luis", "Ana", 6)
    make_partida("Marta", "Pedro", 4)

    ranking = get_ranking(db_session).set_index("Jugador")

    assert ranking.index[0] == "Ana"
    assert ranking.loc["Ana", "Victorias"] == 2
    assert ranking.loc["Ana", "Derrotas"] == 1
    assert ranking.loc["Ana", "PJ"] == 3
    assert ranking.loc["Ana", "Puntos_Medios"] == 15.0
    assert ranking.loc["Pedro", "Victorias"] == 0
    assert ranking.loc["Pedro", "Pct_Victorias"] == 0.0
    assert ranking.loc["Pedro", "Puntos_Medios"] == 0.0
