"""
行程相关接口测试
测试行程创建、获取、更新、确认等基本功能
"""

from fastapi import status


class TestTripCreation:
    """行程创建测试"""

    def test_create_trip_success(self, client, sample_trip_data):
        """测试成功创建行程，返回行程编码"""
        response = client.post("/trips", json=sample_trip_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert set(data) == {"tripCode"}
        assert len(data["tripCode"]) == 36

    def test_create_trip_registers_owner_and_invitees(self, client, sample_trip_data):
        """创建者是已确认参与者，受邀者待确认"""
        trip_code = client.post("/trips", json=sample_trip_data).json()["tripCode"]

        participants = client.get(f"/trips/{trip_code}/participants").json()

        assert [p["email"] for p in participants] == [
            "maria@example.com",
            "joao@example.com",
            "ana@example.com",
        ]
        owner = participants[0]
        assert owner["name"] == "Maria Souza"
        assert owner["confirmedAt"] is not None
        assert all(p["confirmedAt"] is None and p["name"] is None for p in participants[1:])
        assert all(p["tripCode"] == trip_code for p in participants)

    def test_create_trip_notifies_owner(self, client, sample_trip_data, sent_emails):
        """创建行程后给创建者发确认邮件，不给受邀者发"""
        trip_code = client.post("/trips", json=sample_trip_data).json()["tripCode"]

        assert [(kind, email) for kind, email, _ in sent_emails] == [("trip_created", "maria@example.com")]
        assert sent_emails[0][2].code == trip_code
        assert sent_emails[0][2].destination == sample_trip_data["destination"]

    def test_create_trip_without_invites(self, client, sample_trip_data):
        data = dict(sample_trip_data)
        del data["emailsToInvite"]
        response = client.post("/trips", json=data)
        assert response.status_code == status.HTTP_201_CREATED

        participants = client.get(f"/trips/{response.json()['tripCode']}/participants").json()
        assert len(participants) == 1

    def test_create_trip_malformed_date(self, client, sample_trip_data):
        """测试时间格式错误返回 400"""
        data = dict(sample_trip_data, startsAt="01/03/2024")
        response = client.post("/trips", json=data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "ISO-8601" in response.json()["detail"]

    def test_create_trip_missing_offset(self, client, sample_trip_data):
        data = dict(sample_trip_data, endsAt="2024-03-03T00:00:00")
        response = client.post("/trips", json=data)
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_trip_missing_field(self, client, sample_trip_data):
        """测试缺少必填字段"""
        data = dict(sample_trip_data)
        del data["destination"]
        response = client.post("/trips", json=data)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestTripRetrieval:
    """行程获取测试"""

    def test_get_trip_success(self, client, trip_code, sample_trip_data):
        response = client.get(f"/trips/{trip_code}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["code"] == trip_code
        assert data["destination"] == sample_trip_data["destination"]
        assert data["ownerName"] == sample_trip_data["ownerName"]
        assert data["ownerEmail"] == sample_trip_data["ownerEmail"]
        assert data["startsAt"] == "2024-03-01T00:00:00-03:00"
        assert data["endsAt"] == "2024-03-03T00:00:00-03:00"
        assert data["confirmedAt"] is None
        assert "id" not in data

    def test_get_trip_not_found(self, client):
        response = client.get("/trips/00000000-0000-0000-0000-000000000000")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "行程未找到"


class TestTripUpdate:
    """行程更新测试"""

    def test_update_trip_success(self, client, trip_code, sample_trip_data):
        update = dict(
            sample_trip_data,
            destination="Lisboa, Portugal",
            endsAt="2024-03-05T12:00:00+01:00",
            ownerName="Maria S.",
        )
        response = client.put(f"/trips/{trip_code}", json=update)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["destination"] == "Lisboa, Portugal"
        assert data["ownerName"] == "Maria S."
        assert data["endsAt"] == "2024-03-05T12:00:00+01:00"
        assert data["startsAt"] == "2024-03-01T00:00:00-03:00"

        assert client.get(f"/trips/{trip_code}").json()["destination"] == "Lisboa, Portugal"

    def test_update_trip_does_not_invite(self, client, trip_code, sample_trip_data):
        update = dict(sample_trip_data, emailsToInvite=["new@example.com"])
        client.put(f"/trips/{trip_code}", json=update)

        emails = [p["email"] for p in client.get(f"/trips/{trip_code}/participants").json()]
        assert "new@example.com" not in emails

    def test_update_trip_not_found(self, client, sample_trip_data):
        response = client.put("/trips/missing", json=sample_trip_data)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_trip_malformed_date(self, client, trip_code, sample_trip_data):
        response = client.put(f"/trips/{trip_code}", json=dict(sample_trip_data, startsAt="yesterday"))
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestTripConfirmation:
    """行程确认测试"""

    def test_confirm_trip_success(self, client, trip_code, sent_emails):
        sent_emails.clear()
        response = client.patch(f"/trips/{trip_code}/confirm")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Trip confirmed"}
        assert client.get(f"/trips/{trip_code}").json()["confirmedAt"] is not None

        # 确认后给所有参与者（包括创建者）发送邀请
        assert sorted(email for kind, email, _ in sent_emails if kind == "invitation") == [
            "ana@example.com",
            "joao@example.com",
            "maria@example.com",
        ]

    def test_confirm_trip_twice(self, client, trip_code, sent_emails):
        """测试重复确认返回 400，且不再发送邮件"""
        client.patch(f"/trips/{trip_code}/confirm")
        sent_emails.clear()

        response = client.patch(f"/trips/{trip_code}/confirm")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Trip already confirmed"
        assert sent_emails == []

    def test_confirm_trip_not_found(self, client):
        response = client.patch("/trips/missing/confirm")
        assert response.status_code == status.HTTP_404_NOT_FOUND


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
