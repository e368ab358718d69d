import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='RankOrderGame',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Time when the record was created.')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Time when the record was last updated.')),
                ('title', models.CharField(max_length=100)),
                ('description', models.TextField(blank=True, default='', max_length=500)),
                ('time_limit_secs', models.PositiveIntegerField(blank=True, help_text='Optional time limit in seconds.', null=True)),
                ('show_images', models.BooleanField(default=False)),
                ('creator_id', models.CharField(blank=True, help_text='Opaque creator identifier.', max_length=64, null=True)),
            ],
            options={
                'verbose_name': 'Rank Order Game',
                'verbose_name_plural': 'Rank Order Games',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='SlidingPuzzle',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Time when the record was created.')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Time when the record was last updated.')),
                ('title', models.CharField(max_length=100)),
                ('description', models.TextField(blank=True, default='')),
                ('grid_size', models.PositiveSmallIntegerField(default=3, help_text='Tiles per side.', validators=[django.core.validators.MinValueValidator(2)])),
                ('difficulty', models.CharField(choices=[('easy', 'Easy'), ('medium', 'Medium'), ('hard', 'Hard')], default='medium', max_length=16)),
                ('category', models.CharField(blank=True, default='', max_length=64)),
                ('image_url', models.URLField(blank=True, default='')),
                ('is_active', models.BooleanField(db_index=True, default=True)),
            ],
            options={
                'verbose_name': 'Sliding Puzzle',
                'verbose_name_plural': 'Sliding Puzzles',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='RankOrderItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('item_key', models.CharField(max_length=64)),
                ('content', models.CharField(max_length=255)),
                ('image_url', models.URLField(blank=True, default='')),
                ('correct_position', models.PositiveSmallIntegerField()),
                ('game', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='games.rankordergame')),
            ],
            options={
                'verbose_name': 'Rank Order Item',
                'verbose_name_plural': 'Rank Order Items',
                'ordering': ['correct_position'],
                'unique_together': {('game', 'item_key'), ('game', 'correct_position')},
            },
        ),
        migrations.CreateModel(
            name='RankOrderAttempt',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Time when the record was created.')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Time when the record was last updated.')),
                ('player_name', models.CharField(blank=True, default='', max_length=64)),
                ('score', models.PositiveIntegerField()),
                ('max_score', models.PositiveIntegerField()),
                ('correct_count', models.PositiveSmallIntegerField()),
                ('is_correct', models.BooleanField(default=False)),
                ('time_taken_secs', models.PositiveIntegerField(blank=True, null=True)),
                ('puzzle', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attempts', to='games.rankordergame')),
            ],
            options={
                'verbose_name': 'Rank Order Attempt',
                'verbose_name_plural': 'Rank Order Attempts',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='SlidingPuzzleScore',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Time when the record was created.')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Time when the record was last updated.')),
                ('player_name', models.CharField(max_length=50)),
                ('moves', models.PositiveIntegerField()),
                ('time_spent_secs', models.PositiveIntegerField()),
                ('completed', models.BooleanField(default=True)),
                ('puzzle', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='games.slidingpuzzle')),
            ],
            options={
                'verbose_name': 'Sliding Puzzle Score',
                'verbose_name_plural': 'Sliding Puzzle Scores',
                'ordering': ['created_at', 'id'],
                'indexes': [models.Index(fields=['puzzle', 'completed'], name='games_sliding_completed_idx')],
            },
        ),
    ]
