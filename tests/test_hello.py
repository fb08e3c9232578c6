"""Tests for the hello lab routes"""


class TestHelloRoutes:

    async def test_root(self, test_client):
        response = await test_client.get("/")
        assert response.json() == {"message": "Hello World!"}

    async def test_quote_of_the_day(self, test_client):
        response = await test_client.get("/quote-of-the-day")
        assert response.status_code == 200
        assert "quote" in response.json()

    async def test_hello_name(self, test_client):
        response = await test_client.get("/hello/Tan")
        assert response.json() == {"message": "Hello Tan"}

    async def test_add_two_integers(self, test_client):
        response = await test_client.get("/addTwo/3/4")
        assert response.json() == {"message": "The sum is 7"}

    async def test_add_two_decimals(self, test_client):
        response = await test_client.get("/addTwo/1.5/2.25")
        assert response.json() == {"message": "The sum is 3.75"}

    async def test_add_two_rejects_non_numbers(self, test_client):
        response = await test_client.get("/addTwo/three/4")
        assert response.status_code == 400

    async def test_employee_echoes_query(self, test_client):
        response = await test_client.get("/employee", params={"employeeName": "Alice", "joinDate": "2023-01-15"})
        assert response.json() == {"Employee Name": "Alice", "Date of Join": "2023-01-15"}

    async def test_employee_without_query(self, test_client):
        response = await test_client.get("/employee")
        assert response.json() == {"Employee Name": None, "Date of Join": None}
