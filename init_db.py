from app.core.database import engine, Base

# --- IMPORTANTE: Importar TODOS los modelos que quieras crear ---
from app.models.partida import Partida

def init_db():
    print("🔄 Conectando a la base de datos...")

    # 1. Borrar todo lo viejo (¡Reset total!)
    # CUIDADO: Esto borra TODOS los datos que tengas ahora mismo.
    print("🗑️  Borrando tablas antiguas...")
    Base.metadata.drop_all(bind=engine)

    # 2. Crear las tablas nuevas
    print(f"✨ Creando tablas nuevas ({Partida.__tablename__})...")
    Base.metadata.create_all(bind=engine)

    print("✅ ¡Base de datos lista y limpia!")

if __name__ == "__main__":
    init_db()
