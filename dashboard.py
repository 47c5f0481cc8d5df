import streamlit as st
import pandas as pd
import plotly.express as px
from pydantic import ValidationError

# --- IMPORTACIÓN DIRECTA ---
# Usamos los servicios de la API sin necesitar el servidor encendido
from app.core.database import SessionLocal
from app.repositories.partida_repository import PartidaRepository
from app.schemas.criteria import Pageable, PartidaCriteria
from app.schemas.partida import PartidaIn
from app.services.partida_query_service import PartidaQueryService
from app.services.partida_service import PartidaService
from app.services.ranking import get_ranking
from app.repositories.asociaciones import get_asociaciones

# --- CONFIGURACIÓN ---
st.set_page_config(page_title="Partidas", layout="wide", page_icon="🎲")

PAGE_SIZE = 20

# --- FUNCIONES DE CARGA ---
def load_page(criteria, page):
    db = SessionLocal()
    try:
        service = PartidaQueryService(db, get_asociaciones())
        result = service.find_by_criteria(criteria, Pageable(page=page, size=PAGE_SIZE, sort=["id,desc"]))
        rows = [
            {"id": p.id, "ganador": p.ganador, "perdedor": p.perdedor, "puntosDelGanador": p.puntos_del_ganador}
            for p in result.content
        ]
        return pd.DataFrame(rows, columns=["id", "ganador", "perdedor", "puntosDelGanador"]), result
    finally:
        db.close()

@st.cache_data(ttl=60)
def load_ranking():
    db = SessionLocal()
    try:
        return get_ranking(db)
    except Exception as e:
        st.error(f"Error calculando la clasificación: {e}")
        return pd.DataFrame()
    finally:
        db.close()

def guardar_partida(partida_id, ganador, perdedor, puntos):
    """Crea (sin id) o reemplaza (con id) una partida. Devuelve el id guardado o None."""
    try:
        data = PartidaIn(id=partida_id, ganador=ganador, perdedor=perdedor, puntosDelGanador=puntos)
    except ValidationError as e:
        for err in e.errors():
            st.error(f"Campo '{err['loc'][-1]}': {err['msg']}")
        return None

    db = SessionLocal()
    try:
        if partida_id is not None and not PartidaRepository(db).exists(partida_id):
            st.error(f"La partida {partida_id} ya no existe")
            return None
        service = PartidaService(db)
        result = service.update(data) if partida_id is not None else service.save(data)
        return result.id
    finally:
        db.close()

def borrar_partida(partida_id):
    db = SessionLocal()
    try:
        PartidaService(db).delete(partida_id)
    finally:
        db.close()

# --- SIDEBAR (FILTROS) ---
st.sidebar.title("🔎 Filtros")
filtro_ganador = st.sidebar.text_input("Ganador contiene")
filtro_perdedor = st.sidebar.text_input("Perdedor contiene")
min_puntos = st.sidebar.number_input("Mínimo de puntos del ganador", min_value=0, value=0, step=1)

criteria = PartidaCriteria(
    ganador_contains=filtro_ganador or None,
    perdedor_contains=filtro_perdedor or None,
    puntos_greater_than_or_equal=int(min_puntos) if min_puntos else None,
)

# --- TABLA ---
st.title("🎲 Partidas")

pagina = st.sidebar.number_input("Página", min_value=0, value=0, step=1)
df, page = load_page(criteria, int(pagina))

st.markdown(f"**{page.total}** partidas encontradas | página {page.page + 1} de {max(page.total_pages, 1)}")
st.dataframe(df, use_container_width=True, hide_index=True)

st.divider()

# --- FORMULARIO: CREAR / EDITAR ---
st.subheader("✏️ Crear o editar partida")

ids_disponibles = ["Nueva"] + df["id"].tolist()
seleccion = st.selectbox("Partida", ids_disponibles, key="sel_partida")

actual = None
if seleccion != "Nueva":
    actual = df[df["id"] == seleccion].iloc[0]

with st.form("form_partida"):
    ganador = st.text_input("Ganador", value="" if actual is None else actual["ganador"])
    perdedor = st.text_input("Perdedor", value="" if actual is None else actual["perdedor"])
    puntos = st.number_input(
        "Puntos del ganador",
        min_value=0,
        step=1,
        value=0 if actual is None else int(actual["puntosDelGanador"]),
    )
    guardar = st.form_submit_button("Guardar")

if guardar:
    # Campos obligatorios: un texto vacío cuenta como no informado
    if not ganador.strip() or not perdedor.strip():
        st.error("Ganador y perdedor son obligatorios")
    else:
        partida_id = None if actual is None else int(actual["id"])
        guardado = guardar_partida(partida_id, ganador.strip(), perdedor.strip(), int(puntos))
        if guardado is not None:
            st.success(f"Partida {guardado} guardada")
            load_ranking.clear()

if actual is not None and st.button("🗑️ Borrar partida", type="secondary"):
    borrar_partida(int(actual["id"]))
    st.success(f"Partida {int(actual['id'])} borrada")
    load_ranking.clear()
    st.rerun()

st.divider()

# --- CLASIFICACIÓN ---
st.subheader("🏆 Clasificación")
ranking = load_ranking()

if ranking.empty:
    st.warning("No hay partidas registradas todavía.")
    st.stop()

col1, col2, col3 = st.columns(3)
with col1:
    lider = ranking.iloc[0]
    st.metric("Más victorias", f"{lider['Jugador']}", f"{lider['Victorias']} V")
with col2:
    top_puntos = ranking.loc[ranking["Puntos_Medios"].idxmax()]
    st.metric("Más puntos por victoria", f"{top_puntos['Jugador']}", f"{top_puntos['Puntos_Medios']} pts")
with col3:
    st.metric("Jugadores", len(ranking))

st.dataframe(ranking, use_container_width=True, hide_index=True)

fig = px.bar(
    ranking.head(15),
    x="Jugador",
    y=["Victorias", "Derrotas"],
    barmode="group",
    title="Victorias y derrotas por jugador",
    template="plotly_dark",
    height=500,
)
st.plotly_chart(fig, width="stretch")
