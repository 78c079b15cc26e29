"""Table definitions for the bundled SQLite store."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TableSpec:
    """DDL plus the columns that need conversion on the way in and out."""

    name: str
    ddl: str
    json_columns: frozenset[str] = field(default_factory=frozenset)
    bool_columns: frozenset[str] = field(default_factory=frozenset)


TABLES: dict[str, TableSpec] = {
    spec.name: spec
    for spec in [
        TableSpec(
            name="users",
            ddl="""
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    email TEXT UNIQUE NOT NULL,
                    password_hash TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """,
        ),
        TableSpec(
            name="profiles",
            ddl="""
                CREATE TABLE IF NOT EXISTS profiles (
                    id INTEGER PRIMARY KEY,
                    email TEXT NOT NULL,
                    full_name TEXT DEFAULT '',
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    FOREIGN KEY (id) REFERENCES users(id) ON DELETE CASCADE
                )
            """,
        ),
        TableSpec(
            name="auth_sessions",
            ddl="""
                CREATE TABLE IF NOT EXISTS auth_sessions (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL,
                    access_token TEXT UNIQUE NOT NULL,
                    expires_at TIMESTAMP NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
                )
            """,
        ),
        TableSpec(
            name="exercises",
            ddl="""
                CREATE TABLE IF NOT EXISTS exercises (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT UNIQUE NOT NULL COLLATE NOCASE,
                    description TEXT DEFAULT '',
                    muscle_group TEXT NOT NULL DEFAULT 'other',
                    equipment TEXT NOT NULL DEFAULT 'other',
                    difficulty TEXT NOT NULL DEFAULT 'intermediate',
                    video_url TEXT,
                    thumbnail_url TEXT,
                    instructions TEXT DEFAULT '[]',
                    is_public INTEGER DEFAULT 1,
                    created_by INTEGER,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """,
            json_columns=frozenset({"instructions"}),
            bool_columns=frozenset({"is_public"}),
        ),
        TableSpec(
            name="workout_templates",
            ddl="""
                CREATE TABLE IF NOT EXISTS workout_templates (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER,
                    name TEXT NOT NULL,
                    description TEXT,
                    is_favorite INTEGER DEFAULT 0,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """,
            bool_columns=frozenset({"is_favorite"}),
        ),
        TableSpec(
            name="template_exercises",
            ddl="""
                CREATE TABLE IF NOT EXISTS template_exercises (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    template_id INTEGER NOT NULL,
                    exercise_id INTEGER NOT NULL,
                    sets INTEGER NOT NULL,
                    reps_min INTEGER NOT NULL,
                    reps_max INTEGER NOT NULL,
                    target_weight_kg REAL,
                    notes TEXT,
                    order_index INTEGER NOT NULL DEFAULT 0,
                    FOREIGN KEY (template_id) REFERENCES workout_templates(id) ON DELETE CASCADE,
                    FOREIGN KEY (exercise_id) REFERENCES exercises(id)
                )
            """,
        ),
        TableSpec(
            name="workout_sessions",
            ddl="""
                CREATE TABLE IF NOT EXISTS workout_sessions (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER,
                    mood TEXT DEFAULT 'good',
                    notes TEXT,
                    status TEXT NOT NULL DEFAULT 'completed',
                    started_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    finished_at TIMESTAMP,
                    duration_minutes INTEGER
                )
            """,
        ),
        TableSpec(
            name="workout_exercises",
            ddl="""
                CREATE TABLE IF NOT EXISTS workout_exercises (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    workout_id INTEGER NOT NULL,
                    exercise_id INTEGER NOT NULL,
                    sets INTEGER NOT NULL,
                    reps_min INTEGER NOT NULL,
                    reps_max INTEGER NOT NULL,
                    weight_kg REAL,
                    notes TEXT,
                    order_index INTEGER NOT NULL DEFAULT 0,
                    FOREIGN KEY (workout_id) REFERENCES workout_sessions(id),
                    FOREIGN KEY (exercise_id) REFERENCES exercises(id)
                )
            """,
        ),
        TableSpec(
            name="trainer_profiles",
            ddl="""
                CREATE TABLE IF NOT EXISTS trainer_profiles (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    specialty TEXT NOT NULL,
                    philosophy TEXT NOT NULL,
                    training_style TEXT NOT NULL,
                    intensity_preference TEXT DEFAULT 'moderate',
                    volume_preference TEXT DEFAULT 'moderate',
                    rest_time_preference INTEGER DEFAULT 90,
                    typical_rep_ranges TEXT DEFAULT '8-12',
                    favorite_exercises TEXT DEFAULT '[]',
                    avoided_exercises TEXT DEFAULT '[]',
                    is_active INTEGER DEFAULT 1,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """,
            json_columns=frozenset({"favorite_exercises", "avoided_exercises"}),
            bool_columns=frozenset({"is_active"}),
        ),
        TableSpec(
            name="ai_generated_workouts",
            ddl="""
                CREATE TABLE IF NOT EXISTS ai_generated_workouts (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    trainer_profile_id INTEGER NOT NULL,
                    workout_name TEXT NOT NULL,
                    goal TEXT NOT NULL,
                    duration_minutes INTEGER,
                    workout_structure TEXT NOT NULL,
                    ai_reasoning TEXT,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    FOREIGN KEY (trainer_profile_id) REFERENCES trainer_profiles(id)
                )
            """,
            json_columns=frozenset({"workout_structure"}),
        ),
    ]
}


INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_exercises_name ON exercises(name)",
    "CREATE INDEX IF NOT EXISTS idx_template_exercises_template ON template_exercises(template_id)",
    "CREATE INDEX IF NOT EXISTS idx_workout_exercises_workout ON workout_exercises(workout_id)",
    "CREATE INDEX IF NOT EXISTS idx_workout_sessions_user ON workout_sessions(user_id)",
    "CREATE INDEX IF NOT EXISTS idx_auth_sessions_token ON auth_sessions(access_token)",
]
