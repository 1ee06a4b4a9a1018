from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='PathAlias',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('path', models.CharField(db_index=True, help_text='System path, e.g. /node/5', max_length=255)),
                ('alias', models.CharField(help_text='Alias served to visitors, e.g. /about-us', max_length=255, unique=True)),
            ],
            options={
                'verbose_name_plural': 'Path aliases',
                'ordering': ['alias'],
            },
        ),
        migrations.CreateModel(
            name='ProtectedPage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('path', models.CharField(help_text='Concrete path like /vip or a pattern like /secret/*. One pattern per line.', max_length=255)),
                ('password', models.CharField(blank=True, help_text='Salted hash, blank uses the global password', max_length=128)),
            ],
            options={
                'ordering': ['id'],
                'permissions': [
                    ('bypass_protection', 'Bypass pages password protection'),
                    ('access_login_screen', 'Access protected page password screen'),
                ],
            },
        ),
    ]
