import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Page',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('slug', models.SlugField(max_length=255)),
                ('page_type', models.CharField(choices=[('page', 'Page'), ('error', 'Error page'), ('redirector', 'Redirector page'), ('virtual', 'Virtual page')], default='page', max_length=20)),
                ('error_code', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('redirect_url', models.CharField(blank=True, max_length=500)),
                ('content', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('copy_of', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='virtual_copies', to='intelligent404.page')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='intelligent404.page')),
            ],
            options={
                'ordering': ['title'],
                'unique_together': {('parent', 'slug')},
            },
        ),
    ]
