import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Activity',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('sport_type', models.CharField(choices=[('Run', 'Run'), ('TrailRun', 'Trail Run'), ('Ride', 'Ride'), ('VirtualRide', 'Virtual Ride'), ('Swim', 'Swim'), ('Walk', 'Walk'), ('Hike', 'Hike'), ('WeightTraining', 'Weight Training'), ('Workout', 'Workout')], default='Run', max_length=32)),
                ('start_date_time', models.DateTimeField(default=django.utils.timezone.now)),
                ('distance_in_meters', models.FloatField(default=0)),
                ('moving_time_in_seconds', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'calendar_activities',
                'ordering': ['start_date_time', 'id'],
                'indexes': [models.Index(fields=['start_date_time'], name='calendar_ac_start_d_5b1f3e_idx'), models.Index(fields=['sport_type', 'start_date_time'], name='calendar_ac_sport_t_8c2a4d_idx')],
            },
        ),
    ]
