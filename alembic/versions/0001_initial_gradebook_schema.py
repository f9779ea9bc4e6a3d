"""initial gradebook schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(200)),
        sa.Column('first_name', sa.String(100)),
        sa.Column('last_name', sa.String(100)),
        sa.Column('password_hash', sa.String(255)),
        *_timestamps(),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'classes',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('teacher_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_classes_id', 'classes', ['id'])
    op.create_index('ix_classes_teacher_id', 'classes', ['teacher_id'])

    op.create_table(
        'students',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('classroom_id', sa.Uuid(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_students_id', 'students', ['id'])
    op.create_index('ix_students_classroom_id', 'students', ['classroom_id'])

    op.create_table(
        'subjects',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('class_id', sa.Uuid(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('lesson_days', sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_subjects_id', 'subjects', ['id'])
    op.create_index('ix_subjects_class_id', 'subjects', ['class_id'])

    op.create_table(
        'lessons',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('subject_id', sa.Uuid(), sa.ForeignKey('subjects.id'), nullable=False),
        sa.Column('class_id', sa.Uuid(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('topic', sa.String(255), nullable=False),
        sa.Column('homework', sa.Text(), nullable=False),
        sa.Column(
            'lesson_type',
            sa.Enum('CLASSWORK', 'INDEPENDENT', 'PROJECT', 'SOR', 'SOCH', name='lessontype'),
            nullable=False,
        ),
        sa.Column('max_score', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('subject_id', 'date', name='uq_lesson_subject_date'),
    )
    op.create_index('ix_lessons_id', 'lessons', ['id'])
    op.create_index('ix_lessons_subject_id', 'lessons', ['subject_id'])
    op.create_index('ix_lessons_class_id', 'lessons', ['class_id'])
    op.create_index('idx_lesson_class_date', 'lessons', ['class_id', 'date'])

    op.create_table(
        'lesson_records',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('lesson_id', sa.Uuid(), sa.ForeignKey('lessons.id'), nullable=False),
        sa.Column('student_id', sa.Uuid(), sa.ForeignKey('students.id'), nullable=False),
        sa.Column('grade', sa.Integer(), nullable=True),
        sa.Column(
            'attendance',
            sa.Enum('PRESENT', 'ABSENT', 'EXCUSED', name='attendancestatus'),
            nullable=False,
        ),
        sa.Column('comment', sa.Text(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('lesson_id', 'student_id', name='uq_lesson_record_student'),
    )
    op.create_index('ix_lesson_records_id', 'lesson_records', ['id'])
    op.create_index('ix_lesson_records_lesson_id', 'lesson_records', ['lesson_id'])
    op.create_index('ix_lesson_records_student_id', 'lesson_records', ['student_id'])

    op.create_table(
        'messages',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('sender_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('classroom_id', sa.Uuid(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('student_id', sa.Uuid(), sa.ForeignKey('students.id'), nullable=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_messages_id', 'messages', ['id'])
    op.create_index('ix_messages_sender_id', 'messages', ['sender_id'])
    op.create_index('ix_messages_classroom_id', 'messages', ['classroom_id'])
    op.create_index('ix_messages_student_id', 'messages', ['student_id'])
    op.create_index('idx_message_class_time', 'messages', ['classroom_id', 'timestamp'])


def downgrade() -> None:
    op.drop_table('messages')
    op.drop_table('lesson_records')
    op.drop_table('lessons')
    op.drop_table('subjects')
    op.drop_table('students')
    op.drop_table('classes')
    op.drop_table('users')
    sa.Enum(name='attendancestatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='lessontype').drop(op.get_bind(), checkfirst=True)
